from datetime import datetime
from typing import Any

from sqlalchemy import JSON, DateTime, Float, Integer, String, Text, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all database models."""

    pass


class Analysis(Base):
    """Stores analysis history and results."""

    __tablename__ = "analyses"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    text_hash: Mapped[str] = mapped_column(String(64), index=True)
    text: Mapped[str] = mapped_column(Text)

    # Document verdict
    dominant_language: Mapped[str] = mapped_column(String(20))

    # Segment-derived proportions
    english_proportion: Mapped[float] = mapped_column(Float, default=0.0)
    french_proportion: Mapped[float] = mapped_column(Float, default=0.0)

    # Full report (scores, tallies, segments) and explanations
    report: Mapped[dict[str, Any]] = mapped_column(JSON, default=dict)
    explanations: Mapped[list[str]] = mapped_column(JSON, default=list)

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
    )
