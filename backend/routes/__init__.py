"""FastAPI API endpoints under /api.

Endpoint groups: health and settings, domains and calendar, streams
(sample, advance, stored history), discovery (search, NPC finder,
recommendations), refinement.
"""

from fastapi import APIRouter

from .refine import router as refine_router
from .settings import router as settings_router
from .streams import router as streams_router

router = APIRouter()
router.include_router(settings_router)
router.include_router(streams_router)
router.include_router(refine_router)
