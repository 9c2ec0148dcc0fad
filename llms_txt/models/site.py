from pydantic import BaseModel


class SiteInfo(BaseModel):
    """Host-level site metadata.

    ``tagline`` and ``admin_email`` are not rendered directly; they are the
    defaults for ``site_description`` and ``contact_email`` when those options
    have never been saved.
    """

    name: str
    url: str
    tagline: str = ""
    admin_email: str = ""

    @property
    def home_url(self) -> str:
        """Site URL with exactly one trailing slash."""
        return trailingslashit(self.url)


def trailingslashit(url: str) -> str:
    return url.rstrip("/\\") + "/"
