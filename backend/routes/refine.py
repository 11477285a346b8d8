"""LLM refinement endpoint."""

from fastapi import APIRouter

from backend import storage
from eternal_stream.refine import RefineRequest, RefineResult, is_refinement_enabled, refine_with_claude

router = APIRouter()


@router.post("/refine")
async def refine(body: RefineRequest) -> RefineResult:
    """Polish one line in the NPC's voice. Never fails; errors come back in the result."""
    if not is_refinement_enabled():
        return RefineResult(text=body.chatbase_text, refined=False, error="Refinement disabled")
    model = storage.get_config()["refinement"].get("model") or None
    return await refine_with_claude(body, model=model)
