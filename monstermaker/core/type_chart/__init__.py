"""타입 상성 Core: 순수 Python, 저장소 무관"""

from .models import DEFAULT_EFFECTIVENESS, TypeNode, TypeRef
from .registry import TypeRegistry
from .standard import STANDARD_CHART, STANDARD_TYPES, load_standard_chart

__all__ = [
    "DEFAULT_EFFECTIVENESS",
    "TypeNode",
    "TypeRef",
    "TypeRegistry",
    "STANDARD_CHART",
    "STANDARD_TYPES",
    "load_standard_chart",
]
