"""Service endpoints that sit outside the resource: health and docs config."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Request

from ..core.config import AppSettings

router = APIRouter(tags=["meta"])

DESCRIPTION = "CRUD API over the Computadoras table (brand, model, processor, RAM, storage, OS)."


def docs_definition(settings: AppSettings, openapi_version: str) -> dict[str, Any]:
    """Build the documentation config the OpenAPI description is generated from."""

    definition: dict[str, Any] = {
        "openapi": openapi_version,
        "info": {
            "title": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "description": DESCRIPTION,
        },
    }
    if settings.PUBLIC_URL:
        definition["servers"] = [{"url": settings.PUBLIC_URL}]
    return definition


@router.get("/health")
async def health() -> dict[str, bool]:
    return {"ok": True}


@router.get("/options", summary="Raw documentation configuration")
async def options(request: Request) -> dict[str, Any]:
    return request.app.state.docs_definition
