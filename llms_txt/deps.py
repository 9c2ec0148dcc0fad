"""Dependency injection for FastAPI routes."""

from typing import Annotated, Optional

from fastapi import Depends, Request

from llms_txt.models.site import SiteInfo
from llms_txt.services.configuration import ConfigurationStore
from llms_txt.services.content import ContentRepository
from llms_txt.services.generator import ContentFilter
from llms_txt.services.sitemap import SitemapRegistry


def get_config_store(request: Request) -> ConfigurationStore:
    return request.app.state.config_store


def get_content_repository(request: Request) -> ContentRepository:
    return request.app.state.content_repository


def get_site(request: Request) -> SiteInfo:
    return request.app.state.site


def get_sitemaps(request: Request) -> SitemapRegistry:
    return request.app.state.sitemaps


def get_content_filter(request: Request) -> Optional[ContentFilter]:
    return request.app.state.content_filter


# Type aliases for dependency injection
ConfigStore = Annotated[ConfigurationStore, Depends(get_config_store)]
Content = Annotated[ContentRepository, Depends(get_content_repository)]
Site = Annotated[SiteInfo, Depends(get_site)]
Sitemaps = Annotated[SitemapRegistry, Depends(get_sitemaps)]
Filter = Annotated[Optional[ContentFilter], Depends(get_content_filter)]
