"""타입 저장소: 아레나 기반 상성 그래프"""

from __future__ import annotations

import itertools
import logging
from typing import Optional

from .models import DEFAULT_EFFECTIVENESS, TypeNode, TypeRef

logger = logging.getLogger(__name__)

_registry_ids = itertools.count(1)


class TypeRegistry:
    """
    타입 노드 저장소.
    모든 노드를 소유하고, 노드 간 상성 배율을 희소하게 보관한다.

    관례: effectiveness_of(defender, attacker)
        → attacker 타입이 defender 타입에 주는 배율.
    """

    def __init__(self) -> None:
        self._id = next(_registry_ids)
        self._nodes: list[TypeNode] = []

    # === 노드 관리 ===

    def create(self, name: str) -> TypeRef:
        """새 타입 노드 생성. 이름 중복 허용."""
        self._nodes.append(TypeNode(name=name))
        ref = TypeRef(index=len(self._nodes) - 1, registry_id=self._id)
        logger.debug("Created type %r as #%d", name, ref.index)
        return ref

    def name_of(self, ref: TypeRef) -> str:
        return self._node(ref).name

    def rename(self, ref: TypeRef, name: str) -> None:
        """표시 이름 변경. 관계는 인덱스 키라 영향 없음."""
        self._node(ref).name = name

    def get(self, index: int) -> Optional[TypeRef]:
        """인덱스로 핸들 조회. 없으면 None."""
        if 0 <= index < len(self._nodes):
            return TypeRef(index=index, registry_id=self._id)
        return None

    def get_all(self) -> list[TypeRef]:
        """생성 순서대로 전체 핸들 반환."""
        return [TypeRef(index=i, registry_id=self._id) for i in range(len(self._nodes))]

    def find_by_name(self, name: str) -> Optional[TypeRef]:
        """이름이 같은 첫 번째(가장 먼저 생성된) 노드. 없으면 None."""
        for i, node in enumerate(self._nodes):
            if node.name == name:
                return TypeRef(index=i, registry_id=self._id)
        return None

    def find_all_by_name(self, name: str) -> list[TypeRef]:
        return [
            TypeRef(index=i, registry_id=self._id)
            for i, node in enumerate(self._nodes)
            if node.name == name
        ]

    def count(self) -> int:
        """등록된 타입 수."""
        return len(self._nodes)

    def __contains__(self, ref: object) -> bool:
        return (
            isinstance(ref, TypeRef)
            and ref.registry_id == self._id
            and 0 <= ref.index < len(self._nodes)
        )

    # === 상성 ===

    def set_effectiveness(
        self, source: TypeRef, target: TypeRef, multiplier: float
    ) -> None:
        """(source, target) 배율 기록. 기존 값은 덮어쓴다.

        범위 검증 없음 (0, 음수 포함 그대로 저장).
        1.0은 미설정과 구분하지 않으므로 저장 대신 항목을 제거한다.
        """
        node = self._node(source)
        self._node(target)
        value = float(multiplier)
        if value == DEFAULT_EFFECTIVENESS:
            node.effectiveness.pop(target.index, None)
        else:
            node.effectiveness[target.index] = value

    def effectiveness_of(self, source: TypeRef, target: TypeRef) -> float:
        """(source, target) 배율. 미설정이면 1.0. 실패하지 않는다."""
        node = self._node(source)
        self._node(target)
        return node.effectiveness.get(target.index, DEFAULT_EFFECTIVENESS)

    def overrides_of(self, source: TypeRef) -> dict[TypeRef, float]:
        """source에 저장된 비중립 배율 사본 (target 핸들 → 배율)."""
        return {
            TypeRef(index=i, registry_id=self._id): value
            for i, value in self._node(source).effectiveness.items()
        }

    def _node(self, ref: TypeRef) -> TypeNode:
        if ref not in self:
            raise ValueError(f"Type handle does not belong to this registry: {ref}")
        return self._nodes[ref.index]
