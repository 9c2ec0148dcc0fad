"""XML sitemap providers and the registry that renders them.

The registry follows the WordPress core sitemap layout: an index at
``/wp-sitemap.xml`` pointing at one ``/wp-sitemap-{name}-{page}.xml`` url set
per provider page.
"""

import logging
from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional, Protocol
from xml.etree import ElementTree

from llms_txt.models.sitemap import SitemapEntry

logger = logging.getLogger(__name__)

SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"

# Provider names used by WordPress core; custom providers must avoid them
BUILTIN_PROVIDERS = frozenset({"posts", "pages", "taxonomies", "users"})

_XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>\n'

LLMS_PROVIDER_NAME = "llms"
LLMS_PRIORITY = 0.8

Clock = Callable[[], datetime]


class SitemapProvider(Protocol):
    def get_url_list(self, page_number: int) -> List[SitemapEntry]: ...

    def get_max_num_pages(self) -> int: ...


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class LlmsSitemapProvider:
    """Contributes the single llms.txt URL to the sitemap."""

    def __init__(self, location: str, clock: Clock = _utc_now) -> None:
        self.location = location
        self.clock = clock

    def get_url_list(self, page_number: int) -> List[SitemapEntry]:
        return [
            SitemapEntry(
                loc=self.location,
                lastmod=self.clock().isoformat(timespec="seconds"),
                priority=LLMS_PRIORITY,
            )
        ]

    def get_max_num_pages(self) -> int:
        return 1


class SitemapRegistry:
    """Named sitemap providers for one site."""

    def __init__(self, home_url: str) -> None:
        self.home_url = home_url
        self._providers: Dict[str, SitemapProvider] = {}

    def add_provider(self, name: str, provider: SitemapProvider) -> None:
        """Register *provider* under *name*.

        Raises:
            ValueError: if *name* is reserved by core or already registered.
        """
        if name in BUILTIN_PROVIDERS:
            raise ValueError(f"Sitemap provider name '{name}' is reserved.")
        if name in self._providers:
            raise ValueError(f"Sitemap provider '{name}' is already registered.")
        self._providers[name] = provider
        logger.info("Sitemap provider registered", extra={"provider": name})

    def get_provider(self, name: str) -> Optional[SitemapProvider]:
        return self._providers.get(name)

    @property
    def names(self) -> List[str]:
        return list(self._providers)

    def sitemap_url(self, name: str, page: int) -> str:
        return f"{self.home_url}wp-sitemap-{name}-{page}.xml"

    def render_index(self) -> str:
        """Return the ``<sitemapindex>`` document listing every provider page."""
        root = ElementTree.Element("sitemapindex", xmlns=SITEMAP_NS)
        for name, provider in self._providers.items():
            for page in range(1, provider.get_max_num_pages() + 1):
                sitemap = ElementTree.SubElement(root, "sitemap")
                ElementTree.SubElement(sitemap, "loc").text = self.sitemap_url(name, page)
        return _to_xml(root)

    def render_urlset(self, name: str, page: int) -> Optional[str]:
        """Return the ``<urlset>`` for one provider page, or *None* if it does not exist."""
        provider = self._providers.get(name)
        if provider is None or page < 1 or page > provider.get_max_num_pages():
            return None

        root = ElementTree.Element("urlset", xmlns=SITEMAP_NS)
        for entry in provider.get_url_list(page):
            url = ElementTree.SubElement(root, "url")
            ElementTree.SubElement(url, "loc").text = entry.loc
            if entry.lastmod:
                ElementTree.SubElement(url, "lastmod").text = entry.lastmod
            ElementTree.SubElement(url, "priority").text = f"{entry.priority:.1f}"
        return _to_xml(root)


def _to_xml(root: ElementTree.Element) -> str:
    return _XML_DECLARATION + ElementTree.tostring(root, encoding="unicode")
