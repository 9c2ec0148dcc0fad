"""llms.txt document assembly.

The document is a short Markdown-flavoured text file::

    # Site name

    > Site description

    ## Contact

    - Email: hello@example.com
    - Contact Form: https://example.com/contact

    ## Site

    - https://example.com/

    ## Sitemap

    - https://example.com/wp-sitemap.xml

    ## Important Pages

    - https://example.com/about # About

    ## Recent Posts

    - https://example.com/hello-world # Hello world

Description, Contact, Important Pages and Recent Posts are optional; each
section (heading included) is left out entirely when it has nothing to show.
Every section is followed by one blank line.
"""

from typing import Callable, List, Optional, Sequence

from llms_txt.models.configuration import Configuration
from llms_txt.models.content import ContentItem
from llms_txt.models.site import SiteInfo

SITEMAP_PATH = "wp-sitemap.xml"

ContentFilter = Callable[[str], str]


def _section(lines: List[str]) -> str:
    return "\n".join(lines) + "\n\n"


def _list_section(heading: str, items: Sequence[ContentItem]) -> str:
    return _section([f"## {heading}", ""] + [f"- {item.url} # {item.title}" for item in items])


def generate_llms_txt(
    config: Configuration,
    site: SiteInfo,
    pages: Sequence[ContentItem],
    posts: Sequence[ContentItem],
    content_filter: Optional[ContentFilter] = None,
) -> str:
    """Build the llms.txt body.

    *pages* and *posts* are rendered in the order given; the caller is
    responsible for filtering, sorting and capping them.  When
    *content_filter* is supplied it is applied once to the assembled text
    and its return value is the result.
    """
    home_url = site.home_url
    sections: List[str] = [_section([f"# {site.name}"])]

    if config.site_description:
        sections.append(_section([f"> {config.site_description}"]))

    if config.contact_email or config.contact_url:
        contact = ["## Contact", ""]
        if config.contact_email:
            contact.append(f"- Email: {config.contact_email}")
        if config.contact_url:
            contact.append(f"- Contact Form: {config.contact_url}")
        sections.append(_section(contact))

    sections.append(_section(["## Site", "", f"- {home_url}"]))
    sections.append(_section(["## Sitemap", "", f"- {home_url}{SITEMAP_PATH}"]))

    if config.include_pages and pages:
        sections.append(_list_section("Important Pages", pages))

    if config.include_posts and posts:
        sections.append(_list_section("Recent Posts", posts))

    content = "".join(sections)
    if content_filter is not None:
        content = content_filter(content)
    return content
