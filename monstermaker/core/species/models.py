"""종/몬스터 도메인 모델 (저장소 무관)"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Optional

from monstermaker.core.type_chart.models import TypeRef

U16_MAX = 65535


def _check_u16(field_name: str, value: int) -> None:
    if not 0 <= value <= U16_MAX:
        raise ValueError(f"{field_name} must be in 0..{U16_MAX}, got {value}")


@dataclass(frozen=True)
class BestiaryEntry:
    """도감 확장 필드. BESTIARY_ENABLED일 때만 보관된다."""

    category: str  # "Seed Monster"
    description: str
    weight_in_hectograms: int = 0
    height_in_decimeters: int = 0

    def __post_init__(self) -> None:
        _check_u16("weight_in_hectograms", self.weight_in_hectograms)
        _check_u16("height_in_decimeters", self.height_in_decimeters)


@dataclass(frozen=True)
class Species:
    """종 원형: 불변. 생성 후 참조만 한다."""

    species_id: int  # u16, 고유
    name: str

    # 타입 핸들 (소유하지 않음, 순서 유지)
    types: tuple[TypeRef, ...] = ()

    bestiary: Optional[BestiaryEntry] = None

    def __post_init__(self) -> None:
        _check_u16("species_id", self.species_id)
        # list로 넘겨도 불변 tuple로 보관
        object.__setattr__(self, "types", tuple(self.types))


@dataclass
class Monster:
    """게임 내 몬스터 개체. Species는 species_id로만 참조."""

    name: str
    species_id: int  # Species.species_id 참조
    monster_id: str = field(default_factory=lambda: str(uuid.uuid4()))
