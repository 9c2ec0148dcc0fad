from fastapi import APIRouter, HTTPException, Response

from llms_txt.deps import Sitemaps

router = APIRouter(tags=["Sitemap"])

_XML_MEDIA_TYPE = "application/xml"


@router.get("/wp-sitemap.xml", summary="Sitemap index")
async def sitemap_index(sitemaps: Sitemaps) -> Response:
    return Response(content=sitemaps.render_index(), media_type=_XML_MEDIA_TYPE)


@router.get("/wp-sitemap-{name}-{page}.xml", summary="Sitemap url set for one provider page")
async def sitemap_page(name: str, page: int, sitemaps: Sitemaps) -> Response:
    xml = sitemaps.render_urlset(name, page)
    if xml is None:
        raise HTTPException(status_code=404, detail="Sitemap not found.")
    return Response(content=xml, media_type=_XML_MEDIA_TYPE)
