"""WordPress REST API content repository."""

import logging
from typing import Any, Dict, List, Optional
from urllib.parse import urljoin

import httpx
from bs4 import BeautifulSoup

from llms_txt.models.content import ContentItem
from llms_txt.services.content import PageOrder, PostOrder

logger = logging.getLogger(__name__)

_WP_API_TIMEOUT = 15
# WordPress caps per_page at 100, which is also the largest allowed max_pages/max_posts
_WP_MAX_PER_PAGE = 100
_WP_FIELDS = "link,title"


def _item_to_content(item: Dict[str, Any]) -> Optional[ContentItem]:
    """Convert a single WordPress REST API item to a :class:`ContentItem`."""
    if not isinstance(item, dict):
        return None
    url = item.get("link") or ""
    if not url:
        return None

    title = item.get("title", {})
    rendered = title.get("rendered", "") if isinstance(title, dict) else str(title or "")
    # Titles come back HTML-escaped ("Q&#038;A") and may contain inline markup
    if rendered and ("<" in rendered or "&" in rendered):
        rendered = BeautifulSoup(rendered, "lxml").get_text()
    return ContentItem(url=url, title=rendered.strip())


class WordPressContentRepository:
    """List published pages and posts of a WordPress site over ``/wp-json/wp/v2``.

    Network and decoding errors are logged and produce an empty list, so an
    unreachable WordPress install only hides the corresponding llms.txt
    section.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = _WP_API_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = base_url
        self.timeout = timeout
        self.transport = transport

    def _api_url(self, resource: str) -> str:
        return urljoin(self.base_url.rstrip("/") + "/", f"wp-json/wp/v2/{resource}")

    async def _fetch(self, resource: str, limit: int, params: Dict[str, Any]) -> List[ContentItem]:
        if limit <= 0:
            return []
        api_url = self._api_url(resource)
        query = {
            "status": "publish",
            "per_page": min(limit, _WP_MAX_PER_PAGE),
            "_fields": _WP_FIELDS,
            **params,
        }

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, follow_redirects=True, transport=self.transport
            ) as client:
                resp = await client.get(api_url, params=query)
                resp.raise_for_status()
                items = resp.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("WP API error fetching %s: %s", resource, exc)
            return []

        if not isinstance(items, list):
            logger.warning("WP API returned a non-list payload for %s", resource)
            return []

        results: List[ContentItem] = []
        for item in items[:limit]:
            content = _item_to_content(item)
            if content is not None:
                results.append(content)
        return results

    async def list_published_pages(
        self, limit: int, order: PageOrder = "menu_order"
    ) -> List[ContentItem]:
        return await self._fetch("pages", limit, {"orderby": "menu_order", "order": "asc"})

    async def list_published_posts(
        self, limit: int, order: PostOrder = "date_desc"
    ) -> List[ContentItem]:
        return await self._fetch("posts", limit, {"orderby": "date", "order": "desc"})
