from pydantic import BaseModel


class SitemapEntry(BaseModel):
    loc: str
    lastmod: str
    priority: float
