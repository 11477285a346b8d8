"""Health check and settings endpoints."""

from fastapi import APIRouter, HTTPException
from pydantic import ValidationError

from backend import storage

from .models import StreamSettings

router = APIRouter()


@router.get("/health")
async def health():
    """Health check."""
    return {"status": "ok"}


@router.get("/settings")
async def get_settings():
    """Get global app settings (stream tuning, refinement)."""
    return storage.get_config()


@router.patch("/settings")
async def update_settings(body: dict):
    """Update global app settings (partial merge).

    The merged `stream` group is validated before anything is written;
    out-of-range values are rejected with 422.
    """
    stream = body.get("stream")
    if isinstance(stream, dict):
        merged = {**storage.stream_settings(), **stream}
        try:
            StreamSettings.model_validate(merged)
        except ValidationError as e:
            detail = [{"loc": err["loc"], "msg": err["msg"], "type": err["type"]} for err in e.errors()]
            raise HTTPException(422, detail)
    return storage.update_config(body)
