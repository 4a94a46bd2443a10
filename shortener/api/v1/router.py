from fastapi import APIRouter

from shortener.api.v1.links import router as links_router

router = APIRouter()
router.include_router(links_router)
