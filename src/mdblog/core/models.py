"""Data models for posts, headings, and render results"""

from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Heading(BaseModel):
    """One document heading and the headings nested beneath it."""
    id: str                         # anchor slug; not guaranteed unique
    text: str
    level: int = Field(..., ge=1, le=3)
    subheadings: list["Heading"] = []


class PostMetadata(BaseModel):
    """Frontmatter fields describing a post."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore", coerce_numbers_to_str=True)

    title: str = ""
    published_at: str = Field(default="", alias="publishedAt")
    summary: str = ""
    image: Optional[str] = None

    @field_validator("published_at", mode="before")
    @classmethod
    def _date_to_iso(cls, value):
        # YAML loads unquoted dates as date objects
        if isinstance(value, date):
            return value.isoformat()
        return value


class Post(BaseModel):
    """A blog post: slug, metadata, and raw Markdown source (None when missing)."""
    slug: str
    metadata: PostMetadata = PostMetadata()
    source: Optional[str] = None


@dataclass
class RenderedPost:
    """Result of rendering a Post: injected HTML plus its heading forest."""
    post:     Post
    html:     str
    headings: list[Heading] = field(default_factory=list)
    path:     Optional[Path] = None  # source file, when loaded from disk
