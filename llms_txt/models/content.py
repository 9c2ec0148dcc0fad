from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class ContentItem(BaseModel):
    """A published page or post as listed in llms.txt."""

    url: str  # permalink
    title: str


class ContentRecord(BaseModel):
    """Source record for the static content repository."""

    url: str
    title: str
    type: str = "page"  # "page" or "post"
    status: str = "publish"
    menu_order: int = 0
    published_at: Optional[datetime] = None

    def to_item(self) -> ContentItem:
        return ContentItem(url=self.url, title=self.title)
