"""Configuration store: defaults, permissive validation and merge-on-update.

The store never rejects input.  Invalid emails and URLs are saved as empty
strings, and counts are coerced to integers in range.  Callers that want
strict validation must do it before calling :meth:`ConfigurationStore.update`.
"""

import logging
from typing import Any, Callable, Dict, Mapping

from pydantic import ValidationError

from llms_txt.models.configuration import (
    DEFAULT_MAX_ITEMS,
    MAX_ITEMS,
    MIN_ITEMS,
    Configuration,
)
from llms_txt.models.site import SiteInfo
from llms_txt.services.options import OptionStore
from llms_txt.services.sanitizer import absint, sanitize_email, sanitize_text, sanitize_url, to_bool

logger = logging.getLogger(__name__)

OPTION_NAME = "llms_txt_options"

_TEXT_FIELDS: Dict[str, Callable[[Any], str]] = {
    "site_description": sanitize_text,
    "contact_email": sanitize_email,
    "contact_url": sanitize_url,
}
_TOGGLE_FIELDS = ("include_pages", "include_posts")
_COUNT_FIELDS = ("max_pages", "max_posts")


def default_options(site: SiteInfo) -> Dict[str, Any]:
    """Defaults for every option; the description and email come from *site*."""
    return {
        "site_description": site.tagline,
        "contact_email": site.admin_email,
        "contact_url": "",
        "include_pages": True,
        "include_posts": True,
        "max_pages": DEFAULT_MAX_ITEMS,
        "max_posts": DEFAULT_MAX_ITEMS,
    }


def sanitize_options(raw: Mapping[str, Any]) -> Dict[str, Any]:
    """Normalise a settings form submission.

    Text fields are only touched when present.  Toggles and counts are always
    produced, because the settings form always posts them (an unticked
    checkbox is simply absent).
    """
    sanitized: Dict[str, Any] = {}

    for field, clean in _TEXT_FIELDS.items():
        if field in raw and raw[field] is not None:
            sanitized[field] = clean(raw[field])

    for field in _TOGGLE_FIELDS:
        sanitized[field] = to_bool(raw.get(field))

    for field in _COUNT_FIELDS:
        value = raw.get(field)
        count = DEFAULT_MAX_ITEMS if value is None else absint(value)
        sanitized[field] = min(max(count, MIN_ITEMS), MAX_ITEMS)

    return sanitized


class ConfigurationStore:
    """Reads and writes the :class:`Configuration` blob in an option store."""

    def __init__(self, options: OptionStore, site: SiteInfo, option_name: str = OPTION_NAME) -> None:
        self.options = options
        self.site = site
        self.option_name = option_name

    def read(self) -> Configuration:
        """Return the stored configuration with defaults filled in field by field."""
        defaults = default_options(self.site)
        stored = self.options.get(self.option_name, {})
        if not isinstance(stored, dict):
            logger.warning("Stored %s is not a mapping; using defaults", self.option_name)
            stored = {}

        merged = {**defaults, **{k: v for k, v in stored.items() if k in defaults}}
        try:
            return Configuration.model_validate(merged)
        except ValidationError as exc:
            bad_fields = {str(err["loc"][0]) for err in exc.errors() if err["loc"]}
            logger.warning(
                "Malformed stored options replaced by defaults",
                extra={"fields": sorted(bad_fields)},
            )
            for field in bad_fields:
                merged[field] = defaults[field]
            return Configuration.model_validate(merged)

    def update(self, raw: Mapping[str, Any]) -> Configuration:
        """Sanitise *raw*, merge it over the stored options and persist the result."""
        stored = self.options.get(self.option_name, {})
        if not isinstance(stored, dict):
            stored = {}
        stored.update(sanitize_options(raw))
        self.options.set(self.option_name, stored)
        logger.info("Options saved", extra={"option": self.option_name, "fields": sorted(raw)})
        return self.read()
