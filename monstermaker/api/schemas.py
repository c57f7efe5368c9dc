"""API request/response schemas."""

from typing import Optional

from pydantic import BaseModel, Field


# === Request Schemas ===


class CreateTypeRequest(BaseModel):
    """타입 생성 요청"""

    name: str = Field(..., min_length=1, max_length=50, description="표시 이름 (중복 허용)")


class SetEffectivenessRequest(BaseModel):
    """상성 배율 설정 요청"""

    multiplier: float = Field(..., description="배율 (범위 제한 없음)")


class BestiaryInfo(BaseModel):
    """도감 확장 필드"""

    category: str
    description: str
    weight_in_hectograms: int = Field(0, ge=0, le=65535)
    height_in_decimeters: int = Field(0, ge=0, le=65535)


class DefineSpeciesRequest(BaseModel):
    """종 정의 요청"""

    species_id: int = Field(..., ge=0, le=65535)
    name: str = Field(..., min_length=1)
    type_ids: list[int] = Field(default_factory=list, description="타입 ID (순서 유지)")
    bestiary: Optional[BestiaryInfo] = None


# === Response Schemas ===


class TypeInfo(BaseModel):
    """타입 정보"""

    type_id: int
    name: str


class OverrideInfo(BaseModel):
    """저장된 비중립 배율"""

    attacker_id: int
    attacker_name: str
    multiplier: float


class TypeDetail(BaseModel):
    """타입 상세 (받는 배율 목록 포함)"""

    type_id: int
    name: str
    effectiveness: list[OverrideInfo] = []


class EffectivenessInfo(BaseModel):
    """상성 조회 결과"""

    defender_id: int
    attacker_id: int
    multiplier: float


class SpeciesInfo(BaseModel):
    """종 정보"""

    species_id: int
    name: str
    types: list[TypeInfo] = []
    bestiary: Optional[BestiaryInfo] = None


class HealthResponse(BaseModel):
    status: str
    types: int
    species: int
