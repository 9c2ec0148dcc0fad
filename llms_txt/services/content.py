"""Content repositories supplying published pages and posts."""

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Literal, Protocol, Sequence

from pydantic import TypeAdapter

from llms_txt.models.content import ContentItem, ContentRecord

logger = logging.getLogger(__name__)

PageOrder = Literal["menu_order"]
PostOrder = Literal["date_desc"]

PUBLISHED = "publish"

_RECORDS_ADAPTER = TypeAdapter(List[ContentRecord])
_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


class ContentRepository(Protocol):
    async def list_published_pages(
        self, limit: int, order: PageOrder = "menu_order"
    ) -> List[ContentItem]: ...

    async def list_published_posts(
        self, limit: int, order: PostOrder = "date_desc"
    ) -> List[ContentItem]: ...


def _published_at(record: ContentRecord) -> datetime:
    value = record.published_at
    if value is None:
        return _EPOCH
    # Naive timestamps are treated as UTC so they compare with aware ones
    return value if value.tzinfo else value.replace(tzinfo=timezone.utc)


class StaticContentRepository:
    """Serve pages and posts from an in-memory list of :class:`ContentRecord`."""

    def __init__(self, records: Sequence[ContentRecord] = ()) -> None:
        self.records = list(records)

    @classmethod
    def from_json_file(cls, path: Path) -> "StaticContentRepository":
        """Load records from a JSON array such as ``[{"url": ..., "title": ..., "type": "post"}]``."""
        records = _RECORDS_ADAPTER.validate_python(json.loads(Path(path).read_text(encoding="utf-8")))
        logger.info("Loaded %d content records from %s", len(records), path)
        return cls(records)

    def _published(self, content_type: str) -> List[ContentRecord]:
        return [r for r in self.records if r.type == content_type and r.status == PUBLISHED]

    async def list_published_pages(
        self, limit: int, order: PageOrder = "menu_order"
    ) -> List[ContentItem]:
        # sorted() is stable, so pages sharing a menu_order keep insertion order
        pages = sorted(self._published("page"), key=lambda r: r.menu_order)
        return [r.to_item() for r in pages[:limit]]

    async def list_published_posts(
        self, limit: int, order: PostOrder = "date_desc"
    ) -> List[ContentItem]:
        posts = sorted(self._published("post"), key=_published_at, reverse=True)
        return [r.to_item() for r in posts[:limit]]
