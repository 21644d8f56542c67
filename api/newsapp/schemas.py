from datetime import datetime
from typing import List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

class Source(BaseModel):
    model_config = ConfigDict(frozen=True)

    # newsapi mixes string slugs, numbers and null here
    id: Optional[Union[str, int]] = None
    name: str = ""

    @field_validator("name", mode="before")
    @classmethod
    def _null_name(cls, value):
        return "" if value is None else value

class Article(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    source: Source = Field(default_factory=Source)
    author: str = ""
    title: str = ""
    description: str = ""
    url: str = ""
    url_to_image: str = Field(default="", alias="urlToImage")
    published_at: datetime = Field(alias="publishedAt")
    content: str = ""

    @field_validator("author", "title", "description", "url", "url_to_image", "content", mode="before")
    @classmethod
    def _null_to_empty(cls, value):
        return "" if value is None else value

    @field_validator("source", mode="before")
    @classmethod
    def _null_source(cls, value):
        return {} if value is None else value

    def format_published_date(self) -> str:
        """Display date such as ``March 7, 2024``."""
        d = self.published_at
        return f"{d.strftime('%B')} {d.day}, {d.year}"

class ArticlesPayload(BaseModel):
    status: str
    total_results: int = Field(alias="totalResults", ge=0)
    articles: List[Article] = []

class UpstreamError(BaseModel):
    status: str
    code: str = ""
    message: str

class SearchCursor(BaseModel):
    model_config = ConfigDict(frozen=True)

    keyword: str = ""
    requested_page: int = Field(default=1, ge=1)

class SearchResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    keyword: str
    articles: Tuple[Article, ...] = ()
    current_page: int = 1
    next_page: int = 1
    total_pages: int = 0
    total_results: int = 0

    @computed_field
    @property
    def is_last_page(self) -> bool:
        return self.current_page >= self.total_pages

    @computed_field
    @property
    def previous_page(self) -> int:
        return self.current_page - 1

    @property
    def has_previous(self) -> bool:
        return self.previous_page >= 1
