"""도감 Service: 타입 저장소 + 종 저장소 연결

배율 합성(복합 타입 곱셈)은 전투 쪽 책임. 여기서는 하지 않는다.
"""

from __future__ import annotations

from typing import Optional, Sequence

from monstermaker.config import Settings
from monstermaker.core.logging import get_logger
from monstermaker.core.species import BestiaryEntry, Monster, Species, SpeciesRegistry
from monstermaker.core.type_chart import TypeRef, TypeRegistry, load_standard_chart

logger = get_logger(__name__)


class DexService:
    """타입/종 조회 + 정의"""

    def __init__(self, types: TypeRegistry, species: SpeciesRegistry):
        self._types = types
        self._species = species

    @property
    def types(self) -> TypeRegistry:
        return self._types

    @property
    def species(self) -> SpeciesRegistry:
        return self._species

    # === 타입 ===

    def create_type(self, name: str) -> TypeRef:
        ref = self._types.create(name)
        logger.info(f"Type created: {name} (#{ref.index})")
        return ref

    def find_type(self, name: str) -> Optional[TypeRef]:
        return self._types.find_by_name(name)

    def set_effectiveness(
        self, defender: TypeRef, attacker: TypeRef, multiplier: float
    ) -> None:
        """attacker가 defender에 주는 배율 설정."""
        self._types.set_effectiveness(defender, attacker, multiplier)
        logger.debug(
            f"Effectiveness set: {self._types.name_of(attacker)} → "
            f"{self._types.name_of(defender)} = {multiplier}"
        )

    def effectiveness_of(self, defender: TypeRef, attacker: TypeRef) -> float:
        return self._types.effectiveness_of(defender, attacker)

    # === 종 ===

    def define_species(
        self,
        species_id: int,
        name: str,
        types: Sequence[TypeRef],
        bestiary: Optional[BestiaryEntry] = None,
    ) -> Species:
        """종 정의. 타입은 모두 이 도감의 TypeRegistry 소속이어야 한다."""
        for ref in types:
            if ref not in self._types:
                raise ValueError(f"Type not registered: {ref}")
        species = self._species.register(
            Species(species_id=species_id, name=name, types=tuple(types), bestiary=bestiary)
        )
        logger.info(f"Species defined: #{species_id} {name}")
        return species

    def type_names(self, species: Species) -> list[str]:
        return [self._types.name_of(ref) for ref in species.types]

    # === 몬스터 ===

    def spawn_monster(self, species_id: int, name: Optional[str] = None) -> Monster:
        return self._species.spawn(species_id, name)

    def species_of(self, monster: Monster) -> Optional[Species]:
        return self._species.species_of(monster)


def build_dex_service(settings: Settings) -> DexService:
    """설정에 따라 저장소 구성. SEED_TYPE_CHART면 표준 상성표 로드."""
    types = TypeRegistry()
    if settings.SEED_TYPE_CHART:
        load_standard_chart(types)
    species = SpeciesRegistry(bestiary_enabled=settings.BESTIARY_ENABLED)
    return DexService(types, species)
