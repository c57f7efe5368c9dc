"""타입 도메인 모델 (저장소 무관)

타입 노드는 TypeRegistry의 아레나(list)에 저장되고,
외부에는 불변 핸들 TypeRef만 노출한다.
상성 관계는 아레나 인덱스(int) → 배율(float) 매핑이라
자기 참조/상호 참조가 있어도 객체 참조 순환이 생기지 않는다.
"""

from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_EFFECTIVENESS = 1.0  # 미설정 관계의 중립 배율


@dataclass(frozen=True)
class TypeRef:
    """타입 노드 핸들: 불변, 해시 가능.

    동일성은 (registry_id, index)로만 결정된다. 이름은 포함하지 않는다.
    """

    index: int  # 아레나 슬롯 = 공개 type_id
    registry_id: int  # 소유 TypeRegistry 식별자


@dataclass
class TypeNode:
    """아레나에 저장되는 타입 노드 본체.

    effectiveness: 다른 타입(인덱스)이 이 타입에 주는 배율.
    1.0인 항목은 저장하지 않는다 (희소 표현).
    """

    name: str
    effectiveness: dict[int, float] = field(default_factory=dict)
