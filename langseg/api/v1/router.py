from fastapi import APIRouter

from langseg.api.v1.endpoints import analyze, history

api_router = APIRouter()

api_router.include_router(
    analyze.router,
    prefix="/analyze",
    tags=["Analysis"],
)

api_router.include_router(
    history.router,
    prefix="/history",
    tags=["History"],
)
