import logging

from fastapi import APIRouter
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import PlainTextResponse

from llms_txt.deps import ConfigStore, Content, Filter, Site
from llms_txt.services.generator import generate_llms_txt

logger = logging.getLogger(__name__)

DEFAULT_ENDPOINT = "llms.txt"


def endpoint_path(endpoint: str = DEFAULT_ENDPOINT) -> str:
    """Return the request path serving *endpoint* at the site root."""
    return "/" + endpoint.strip("/")


def match(request_path: str, endpoint: str = DEFAULT_ENDPOINT) -> bool:
    """Return *True* when *request_path* is exactly the llms.txt endpoint.

    Request dispatch is delegated to FastAPI: :func:`build_router` registers
    its route at :func:`endpoint_path`, the same path compared here.
    """
    return request_path == endpoint_path(endpoint)


async def serve_llms_txt(
    store: ConfigStore,
    content: Content,
    site: Site,
    content_filter: Filter,
) -> PlainTextResponse:
    """Generate llms.txt from the current options and published content."""
    config = await run_in_threadpool(store.read)

    pages = await content.list_published_pages(config.max_pages) if config.include_pages else []
    posts = await content.list_published_posts(config.max_posts) if config.include_posts else []

    body = generate_llms_txt(config, site, pages, posts, content_filter=content_filter)
    logger.info("llms.txt generated", extra={"pages": len(pages), "posts": len(posts), "chars": len(body)})
    return PlainTextResponse(body)


def build_router(endpoint: str = DEFAULT_ENDPOINT) -> APIRouter:
    """Return a router that serves llms.txt at *endpoint*."""
    router = APIRouter(tags=["llms.txt"])
    router.add_api_route(
        endpoint_path(endpoint),
        serve_llms_txt,
        methods=["GET"],
        response_class=PlainTextResponse,
        summary="Serve the generated llms.txt",
        description=(
            "Plain-text discovery file for language-model crawlers: site title and "
            "description, contact details, site and sitemap URLs, and optional "
            "lists of important pages and recent posts."
        ),
    )
    return router
