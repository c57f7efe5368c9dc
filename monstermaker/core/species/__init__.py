"""종/몬스터 Core: 순수 Python, 저장소 무관"""

from .models import BestiaryEntry, Monster, Species
from .registry import SpeciesRegistry

__all__ = [
    "BestiaryEntry",
    "Monster",
    "Species",
    "SpeciesRegistry",
]
