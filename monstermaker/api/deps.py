"""Dependency providers for API routers."""

from fastapi import Request

from monstermaker.services.dex_service import DexService


def get_dex_service(request: Request) -> DexService:
    """DexService 인스턴스 반환 (의존성 주입)"""
    service: DexService = request.app.state.dex_service
    return service
