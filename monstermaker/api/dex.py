"""Dex API endpoints: types, effectiveness, species."""

from fastapi import APIRouter, Depends, HTTPException, Query

from monstermaker.api.deps import get_dex_service
from monstermaker.api.schemas import (
    BestiaryInfo,
    CreateTypeRequest,
    DefineSpeciesRequest,
    EffectivenessInfo,
    OverrideInfo,
    SetEffectivenessRequest,
    SpeciesInfo,
    TypeDetail,
    TypeInfo,
)
from monstermaker.core.logging import get_logger
from monstermaker.core.species import BestiaryEntry, Species
from monstermaker.core.type_chart import TypeRef
from monstermaker.services.dex_service import DexService

logger = get_logger(__name__)

router = APIRouter(prefix="/dex", tags=["dex"])


def _resolve_type(dex: DexService, type_id: int) -> TypeRef:
    """type_id → TypeRef. 없으면 404"""
    ref = dex.types.get(type_id)
    if ref is None:
        raise HTTPException(status_code=404, detail=f"Type not found: {type_id}")
    return ref


def _build_type_info(dex: DexService, ref: TypeRef) -> TypeInfo:
    return TypeInfo(type_id=ref.index, name=dex.types.name_of(ref))


def _build_species_info(dex: DexService, species: Species) -> SpeciesInfo:
    bestiary = None
    if species.bestiary is not None:
        bestiary = BestiaryInfo(
            category=species.bestiary.category,
            description=species.bestiary.description,
            weight_in_hectograms=species.bestiary.weight_in_hectograms,
            height_in_decimeters=species.bestiary.height_in_decimeters,
        )
    return SpeciesInfo(
        species_id=species.species_id,
        name=species.name,
        types=[_build_type_info(dex, ref) for ref in species.types],
        bestiary=bestiary,
    )


# === Types ===


@router.get("/types", response_model=list[TypeInfo])
def list_types(dex: DexService = Depends(get_dex_service)) -> list[TypeInfo]:
    return [_build_type_info(dex, ref) for ref in dex.types.get_all()]


@router.post("/types", response_model=TypeInfo, status_code=201)
def create_type(
    request: CreateTypeRequest, dex: DexService = Depends(get_dex_service)
) -> TypeInfo:
    ref = dex.create_type(request.name)
    return _build_type_info(dex, ref)


# /types/{type_id}보다 먼저 등록해야 함
@router.get("/types/lookup", response_model=TypeInfo)
def lookup_type(
    name: str = Query(..., min_length=1), dex: DexService = Depends(get_dex_service)
) -> TypeInfo:
    """이름으로 첫 번째 타입 조회. 없으면 404 (기본 배율로 대체하지 않음)."""
    ref = dex.find_type(name)
    if ref is None:
        raise HTTPException(status_code=404, detail=f"Type not found: {name}")
    return _build_type_info(dex, ref)


@router.get("/types/{type_id}", response_model=TypeDetail)
def get_type(type_id: int, dex: DexService = Depends(get_dex_service)) -> TypeDetail:
    ref = _resolve_type(dex, type_id)
    overrides = sorted(dex.types.overrides_of(ref).items(), key=lambda kv: kv[0].index)
    return TypeDetail(
        type_id=ref.index,
        name=dex.types.name_of(ref),
        effectiveness=[
            OverrideInfo(
                attacker_id=attacker.index,
                attacker_name=dex.types.name_of(attacker),
                multiplier=multiplier,
            )
            for attacker, multiplier in overrides
        ],
    )


@router.get(
    "/types/{defender_id}/effectiveness/{attacker_id}",
    response_model=EffectivenessInfo,
)
def get_effectiveness(
    defender_id: int, attacker_id: int, dex: DexService = Depends(get_dex_service)
) -> EffectivenessInfo:
    defender = _resolve_type(dex, defender_id)
    attacker = _resolve_type(dex, attacker_id)
    return EffectivenessInfo(
        defender_id=defender_id,
        attacker_id=attacker_id,
        multiplier=dex.effectiveness_of(defender, attacker),
    )


@router.put(
    "/types/{defender_id}/effectiveness/{attacker_id}",
    response_model=EffectivenessInfo,
)
def set_effectiveness(
    defender_id: int,
    attacker_id: int,
    request: SetEffectivenessRequest,
    dex: DexService = Depends(get_dex_service),
) -> EffectivenessInfo:
    defender = _resolve_type(dex, defender_id)
    attacker = _resolve_type(dex, attacker_id)
    dex.set_effectiveness(defender, attacker, request.multiplier)
    return EffectivenessInfo(
        defender_id=defender_id,
        attacker_id=attacker_id,
        multiplier=dex.effectiveness_of(defender, attacker),
    )


# === Species ===


@router.get("/species", response_model=list[SpeciesInfo])
def list_species(dex: DexService = Depends(get_dex_service)) -> list[SpeciesInfo]:
    return [_build_species_info(dex, s) for s in dex.species.get_all()]


@router.get("/species/{species_id}", response_model=SpeciesInfo)
def get_species(
    species_id: int, dex: DexService = Depends(get_dex_service)
) -> SpeciesInfo:
    species = dex.species.get(species_id)
    if species is None:
        raise HTTPException(status_code=404, detail=f"Species not found: {species_id}")
    return _build_species_info(dex, species)


@router.post("/species", response_model=SpeciesInfo, status_code=201)
def define_species(
    request: DefineSpeciesRequest, dex: DexService = Depends(get_dex_service)
) -> SpeciesInfo:
    types = [_resolve_type(dex, type_id) for type_id in request.type_ids]

    if dex.species.get(request.species_id) is not None:
        raise HTTPException(
            status_code=409, detail=f"Species already defined: {request.species_id}"
        )

    bestiary = None
    if request.bestiary is not None:
        bestiary = BestiaryEntry(**request.bestiary.model_dump())

    species = dex.define_species(request.species_id, request.name, types, bestiary)
    return _build_species_info(dex, species)
