# movie_crawler/core/models.py
"""Pydantic models shared by the scheduler, strategies and extractors."""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from movie_crawler.core.errors import FetchError


class PageRecord(BaseModel):
    """One extracted listing entry. `page_index` doubles as the rank for sites that emit global ranks."""
    model_config = ConfigDict(frozen=True)

    page_index: int = Field(ge=0)
    title: str
    link: str

    def as_tuple(self) -> tuple:
        return self.page_index, self.title, self.link


class PageRange(BaseModel):
    """Half-open range of pages `[start_page, end_page)` to fetch."""
    model_config = ConfigDict(frozen=True)

    start_page: int = Field(ge=0)
    end_page: int = Field(ge=0)
    page_size: int = Field(gt=0)

    @model_validator(mode="after")
    def _check_bounds(self) -> "PageRange":
        if self.start_page > self.end_page:
            raise ValueError(f"start_page ({self.start_page}) must not exceed end_page ({self.end_page}).")
        return self

    def pages(self) -> range:
        return range(self.start_page, self.end_page)


class PageOutcome(BaseModel):
    """單頁抓取的結果：要麼是完整的記錄列表，要麼是一個 FetchError。"""
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    page_index: int
    records: List[PageRecord] = []
    error: Optional[FetchError] = None

    @property
    def ok(self) -> bool:
        return self.error is None
