import logging
import logging.config
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from llms_txt.config import Settings, get_settings
from llms_txt.models.site import SiteInfo
from llms_txt.routers.llms import build_router, endpoint_path
from llms_txt.routers.settings import limiter, router as settings_router
from llms_txt.routers.sitemap import router as sitemap_router
from llms_txt.services.configuration import ConfigurationStore
from llms_txt.services.content import ContentRepository, StaticContentRepository
from llms_txt.services.generator import ContentFilter
from llms_txt.services.options import InMemoryOptionStore, JsonFileOptionStore, OptionStore
from llms_txt.services.sitemap import LLMS_PROVIDER_NAME, LlmsSitemapProvider, SitemapRegistry
from llms_txt.services.wordpress import WordPressContentRepository

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "json": {
                    "format": '{"time": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", "message": "%(message)s"}',
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "json",
                },
            },
            "root": {"level": level, "handlers": ["console"]},
        }
    )


def build_option_store(settings: Settings) -> OptionStore:
    if settings.options_path:
        return JsonFileOptionStore(settings.options_path)
    logger.warning("LLMS_TXT_OPTIONS_PATH not set; options are kept in memory only")
    return InMemoryOptionStore()


def build_content_repository(settings: Settings) -> ContentRepository:
    """Pick the content source: WordPress REST API, a static JSON file, or nothing."""
    if settings.wordpress_url:
        return WordPressContentRepository(settings.wordpress_url, timeout=settings.request_timeout)
    if settings.content_path:
        return StaticContentRepository.from_json_file(settings.content_path)
    return StaticContentRepository()


def create_app(
    settings: Optional[Settings] = None,
    option_store: Optional[OptionStore] = None,
    content_repository: Optional[ContentRepository] = None,
    content_filter: Optional[ContentFilter] = None,
) -> FastAPI:
    """Assemble the service.

    *content_filter*, when given, receives the assembled llms.txt text and
    returns the text that is actually served.
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    site = SiteInfo(
        name=settings.site_name,
        url=settings.site_url,
        tagline=settings.site_tagline,
        admin_email=settings.admin_email,
    )
    llms_path = endpoint_path(settings.endpoint)

    sitemaps = SitemapRegistry(site.home_url)
    sitemaps.add_provider(LLMS_PROVIDER_NAME, LlmsSitemapProvider(site.home_url + llms_path.lstrip("/")))

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("llms.txt endpoint active", extra={"path": llms_path, "sitemaps": sitemaps.names})
        yield
        logger.info("llms.txt endpoint deactivated", extra={"path": llms_path})

    app = FastAPI(
        title="llms.txt Service",
        description="Serves an llms.txt discovery file for language-model crawlers and lists it in the XML sitemap.",
        version="1.0.1",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.endpoint = settings.endpoint
    app.state.site = site
    app.state.config_store = ConfigurationStore(option_store or build_option_store(settings), site)
    app.state.content_repository = content_repository or build_content_repository(settings)
    app.state.content_filter = content_filter
    app.state.sitemaps = sitemaps

    # Rate-limiting state
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled exception for %s", request.url)
        return JSONResponse(status_code=500, content={"detail": "An unexpected error occurred."})

    app.include_router(build_router(settings.endpoint))
    app.include_router(sitemap_router)
    app.include_router(settings_router)

    @app.get("/", summary="Health check")
    async def root() -> dict:
        return {"message": "Hello from llms.txt Service", "llms_txt": llms_path}

    return app


app = create_app()


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "llms_txt.main:app",
        host=settings.bind_host,
        port=settings.bind_port,
        reload=False,
        workers=1,
    )
