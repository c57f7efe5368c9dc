"""Monster Maker Core"""

from monstermaker.core.type_chart import (
    DEFAULT_EFFECTIVENESS,
    TypeRef,
    TypeRegistry,
    load_standard_chart,
)
from monstermaker.core.species import BestiaryEntry, Monster, Species, SpeciesRegistry

__all__ = [
    "DEFAULT_EFFECTIVENESS",
    "TypeRef",
    "TypeRegistry",
    "load_standard_chart",
    "BestiaryEntry",
    "Monster",
    "Species",
    "SpeciesRegistry",
]
