"""종 저장소: 등록 + 몬스터 생성"""

from __future__ import annotations

import dataclasses
import logging
from typing import Optional

from monstermaker.core.type_chart.models import TypeRef

from .models import Monster, Species

logger = logging.getLogger(__name__)


class SpeciesRegistry:
    """
    종 원형 저장소.
    species_id 고유. 도감 필드는 bestiary_enabled일 때만 보관한다.
    """

    def __init__(self, bestiary_enabled: bool = False) -> None:
        self._bestiary_enabled = bestiary_enabled
        self._species: dict[int, Species] = {}

    @property
    def bestiary_enabled(self) -> bool:
        return self._bestiary_enabled

    def register(self, species: Species) -> Species:
        """종 등록. 반환: 실제 보관된 Species.

        이미 존재하는 species_id면 ValueError.
        도감 비활성 상태면 bestiary를 제거한 사본을 보관한다.
        """
        if species.species_id in self._species:
            raise ValueError(f"Duplicate species_id: {species.species_id}")

        if species.bestiary is not None and not self._bestiary_enabled:
            logger.debug(
                "Bestiary disabled, dropping entry for species #%d", species.species_id
            )
            species = dataclasses.replace(species, bestiary=None)

        self._species[species.species_id] = species
        logger.debug("Registered species #%d %s", species.species_id, species.name)
        return species

    def get(self, species_id: int) -> Optional[Species]:
        """O(1) 조회. 없으면 None."""
        return self._species.get(species_id)

    def get_all(self) -> list[Species]:
        """species_id 순으로 정렬된 전체 목록."""
        return sorted(self._species.values(), key=lambda s: s.species_id)

    def find_by_name(self, name: str) -> Optional[Species]:
        for species in self.get_all():
            if species.name == name:
                return species
        return None

    def search_by_type(self, type_ref: TypeRef) -> list[Species]:
        """해당 타입을 가진 종 목록."""
        return [s for s in self.get_all() if type_ref in s.types]

    def count(self) -> int:
        return len(self._species)

    # === 몬스터 ===

    def spawn(self, species_id: int, name: Optional[str] = None) -> Monster:
        """몬스터 생성. 이름 미지정 시 종 이름 사용."""
        species = self.get(species_id)
        if species is None:
            raise ValueError(f"Species not found: {species_id}")
        return Monster(name=name if name is not None else species.name, species_id=species_id)

    def species_of(self, monster: Monster) -> Optional[Species]:
        return self.get(monster.species_id)
