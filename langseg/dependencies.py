from typing import Annotated, AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from langseg.core.config import Settings, get_settings
from langseg.db.session import get_db_session
from langseg.services.segmentation.windows import WindowSegmenter

SettingsDep = Annotated[Settings, Depends(get_settings)]


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Yield a database session for one request."""
    async with get_db_session() as session:
        yield session


DbSessionDep = Annotated[AsyncSession, Depends(get_db)]


def get_segmenter(settings: SettingsDep) -> WindowSegmenter:
    """Window segmenter configured from the request's settings."""
    return WindowSegmenter(
        window_size=settings.window_size,
        overlap_size=settings.overlap_size,
        min_window_size=settings.min_window_size,
    )


SegmenterDep = Annotated[WindowSegmenter, Depends(get_segmenter)]
