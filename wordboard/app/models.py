"""ORM models: a WordList owns many weighted Words."""

import uuid
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import DateTime, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .db import Base


def _new_id() -> str:
    return str(uuid.uuid4())


def _now() -> datetime:
    return datetime.now(timezone.utc)


class WordList(Base):
    __tablename__ = "word_lists"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    name: Mapped[str] = mapped_column(String(100))
    slug: Mapped[str] = mapped_column(String(100), unique=True)
    theme: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    order: Mapped[int] = mapped_column(Integer, default=0)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=_now)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=_now, onupdate=_now)

    words: Mapped[List["Word"]] = relationship(
        back_populates="word_list", cascade="all, delete-orphan", passive_deletes=True
    )

    def __repr__(self) -> str:
        return f"WordList(id={self.id!r}, slug={self.slug!r})"


class Word(Base):
    __tablename__ = "words"
    __table_args__ = (UniqueConstraint("list_id", "text", name="uq_words_list_text"),)

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    list_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("word_lists.id", ondelete="CASCADE"), index=True
    )
    text: Mapped[str] = mapped_column(String(200))
    weight: Mapped[int] = mapped_column(Integer, default=1)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=_now)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=_now, onupdate=_now)

    word_list: Mapped[WordList] = relationship(back_populates="words")

    def __repr__(self) -> str:
        return f"Word(id={self.id!r}, text={self.text!r}, weight={self.weight})"
