"""Tests for llms_txt.services.generator.generate_llms_txt."""

from unittest.mock import Mock

from llms_txt.models.configuration import Configuration
from llms_txt.models.content import ContentItem
from llms_txt.models.site import SiteInfo
from llms_txt.services.generator import generate_llms_txt

_SITE = SiteInfo(name="Acme", url="https://acme.com")

_PAGES = [
    ContentItem(url="/a", title="A"),
    ContentItem(url="/b", title="B"),
]
_POSTS = [ContentItem(url="https://acme.com/launch", title="Launch day")]


def _config(**overrides) -> Configuration:
    base = {"site_description": "", "contact_email": "", "contact_url": ""}
    return Configuration(**{**base, **overrides})


class TestScenario:
    def test_acme_document(self):
        config = _config(
            site_description="We sell widgets",
            contact_email="hi@acme.com",
            include_pages=True,
            include_posts=False,
        )
        pages = [ContentItem(url="https://acme.com/about", title="About")]
        expected = (
            "# Acme\n"
            "\n"
            "> We sell widgets\n"
            "\n"
            "## Contact\n"
            "\n"
            "- Email: hi@acme.com\n"
            "\n"
            "## Site\n"
            "\n"
            "- https://acme.com/\n"
            "\n"
            "## Sitemap\n"
            "\n"
            "- https://acme.com/wp-sitemap.xml\n"
            "\n"
            "## Important Pages\n"
            "\n"
            "- https://acme.com/about # About\n"
            "\n"
        )
        assert generate_llms_txt(config, _SITE, pages, _POSTS) == expected

    def test_minimal_document(self):
        result = generate_llms_txt(_config(), _SITE, [], [])
        assert result == (
            "# Acme\n\n"
            "## Site\n\n- https://acme.com/\n\n"
            "## Sitemap\n\n- https://acme.com/wp-sitemap.xml\n\n"
        )


class TestSections:
    def test_description_omitted_when_empty(self):
        assert ">" not in generate_llms_txt(_config(), _SITE, [], [])

    def test_contact_lists_email_before_form(self):
        config = _config(contact_email="hi@acme.com", contact_url="https://acme.com/contact")
        result = generate_llms_txt(config, _SITE, [], [])
        assert "## Contact\n\n- Email: hi@acme.com\n- Contact Form: https://acme.com/contact\n\n" in result

    def test_contact_with_only_url(self):
        config = _config(contact_url="https://acme.com/contact")
        result = generate_llms_txt(config, _SITE, [], [])
        assert "- Contact Form: https://acme.com/contact" in result
        assert "Email:" not in result

    def test_contact_omitted_without_details(self):
        assert "## Contact" not in generate_llms_txt(_config(), _SITE, [], [])

    def test_site_url_gets_single_trailing_slash(self):
        site = SiteInfo(name="Acme", url="https://acme.com//")
        result = generate_llms_txt(_config(), site, [], [])
        assert "- https://acme.com/\n" in result
        assert "- https://acme.com/wp-sitemap.xml\n" in result

    def test_pages_disabled_omits_heading(self):
        result = generate_llms_txt(_config(include_pages=False), _SITE, _PAGES, [])
        assert "Important Pages" not in result
        assert "/a # A" not in result

    def test_no_pages_omits_heading(self):
        result = generate_llms_txt(_config(include_pages=True), _SITE, [], [])
        assert "Important Pages" not in result

    def test_posts_disabled_omits_heading(self):
        result = generate_llms_txt(_config(include_posts=False), _SITE, [], _POSTS)
        assert "Recent Posts" not in result

    def test_posts_section(self):
        result = generate_llms_txt(_config(), _SITE, [], _POSTS)
        assert result.endswith("## Recent Posts\n\n- https://acme.com/launch # Launch day\n\n")

    def test_pages_precede_posts(self):
        result = generate_llms_txt(_config(), _SITE, _PAGES, _POSTS)
        assert result.index("## Important Pages") < result.index("## Recent Posts")

    def test_page_order_preserved(self):
        result = generate_llms_txt(_config(), _SITE, _PAGES, [])
        assert result.index("- /a # A") < result.index("- /b # B")

    def test_empty_site_name_passed_through(self):
        site = SiteInfo(name="", url="https://acme.com")
        assert generate_llms_txt(_config(), site, [], []).startswith("# \n\n")


class TestDeterminism:
    def test_repeated_calls_identical(self):
        config = _config(site_description="Same", contact_email="hi@acme.com")
        first = generate_llms_txt(config, _SITE, _PAGES, _POSTS)
        second = generate_llms_txt(config, _SITE, _PAGES, _POSTS)
        assert first == second


class TestContentFilter:
    def test_filter_called_once_with_full_document(self):
        content_filter = Mock(side_effect=lambda text: text.upper())
        result = generate_llms_txt(_config(), _SITE, _PAGES, _POSTS, content_filter=content_filter)

        content_filter.assert_called_once()
        (assembled,), _ = content_filter.call_args
        assert assembled.startswith("# Acme")
        assert "## Recent Posts" in assembled
        assert result == assembled.upper()

    def test_filter_result_returned_verbatim(self):
        result = generate_llms_txt(_config(), _SITE, [], [], content_filter=lambda _text: "replaced")
        assert result == "replaced"
