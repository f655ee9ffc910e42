"""
Request/response schemas

Inputs strip surrounding whitespace before validation, so a blank name or
word fails the min-length check.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

SLUG_PATTERN = r"^[a-z0-9-]+$"


class _Input(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)


class WordListCreate(_Input):
    name: str = Field(min_length=1, max_length=100)
    slug: Optional[str] = Field(None, max_length=100, pattern=SLUG_PATTERN)
    theme: Optional[str] = Field(None, max_length=50)
    order: Optional[int] = None


class WordListRename(_Input):
    name: str = Field(min_length=1, max_length=100)


class WordCreate(_Input):
    list_id: str = Field(min_length=1)
    text: str = Field(min_length=1, max_length=200)
    weight: int = Field(1, ge=1, le=999)


class WordUpdate(_Input):
    text: str = Field(min_length=1, max_length=200)
    weight: int = Field(ge=1, le=999)


class WordListOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    slug: str
    theme: Optional[str] = None
    order: int
    created_at: datetime
    updated_at: datetime


class WordListPage(BaseModel):
    items: List[WordListOut]
    next_cursor: Optional[str] = None


class WordOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    list_id: str
    text: str
    weight: int
    created_at: datetime
    updated_at: datetime


class WordItems(BaseModel):
    items: List[WordOut]


class WordListWithWords(WordListOut):
    words: List[WordOut]


class DisplayItemOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    key: str
    text: str
    lane: int
    vertical_offset_px: int
    font_size_rem: float
    duration_sec: float
    delay_sec: float


class BoardOut(BaseModel):
    list_id: Optional[str] = None
    lane_count: int
    items: List[DisplayItemOut]


class Ok(BaseModel):
    ok: bool = True
