from pydantic import BaseModel, Field

DEFAULT_MAX_ITEMS = 10
MIN_ITEMS = 1
MAX_ITEMS = 100


class Configuration(BaseModel):
    """Options controlling what goes into the generated llms.txt."""

    site_description: str = ""
    contact_email: str = ""
    contact_url: str = ""
    include_pages: bool = True
    include_posts: bool = True
    max_pages: int = Field(
        default=DEFAULT_MAX_ITEMS,
        ge=MIN_ITEMS,
        le=MAX_ITEMS,
        description="Maximum number of pages to list (1–100).",
    )
    max_posts: int = Field(
        default=DEFAULT_MAX_ITEMS,
        ge=MIN_ITEMS,
        le=MAX_ITEMS,
        description="Maximum number of posts to list (1–100).",
    )
