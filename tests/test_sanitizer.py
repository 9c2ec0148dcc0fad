"""Tests for the option sanitisation helpers."""

from llms_txt.services.sanitizer import absint, sanitize_email, sanitize_text, sanitize_url, to_bool


class TestSanitizeText:
    def test_plain_text_unchanged(self):
        assert sanitize_text("We sell widgets") == "We sell widgets"

    def test_strips_markup(self):
        assert sanitize_text("<b>Bold</b> claims") == "Bold claims"

    def test_drops_script_content(self):
        result = sanitize_text("<script>alert('xss')</script>Hello")
        assert "alert" not in result
        assert "Hello" in result

    def test_trims_whitespace(self):
        assert sanitize_text("   padded  \n") == "padded"

    def test_keeps_newlines(self):
        assert sanitize_text("line one\r\nline two") == "line one\nline two"

    def test_none_becomes_empty(self):
        assert sanitize_text(None) == ""

    def test_list_becomes_empty(self):
        assert sanitize_text(["x"]) == ""

    def test_number_becomes_empty(self):
        assert sanitize_text(42) == ""

    def test_entities_decoded_without_markup(self):
        assert sanitize_text("Q&amp;A") == "Q&A"

    def test_entities_decoded_with_markup(self):
        assert sanitize_text("<b>Q&amp;A</b>") == "Q&A"

    def test_bare_ampersand_kept(self):
        assert sanitize_text("Tom & Jerry") == "Tom & Jerry"


class TestSanitizeEmail:
    def test_valid_address(self):
        assert sanitize_email("hi@acme.com") == "hi@acme.com"

    def test_surrounding_whitespace_trimmed(self):
        assert sanitize_email("  hi@acme.com ") == "hi@acme.com"

    def test_invalid_address_becomes_empty(self):
        assert sanitize_email("not-an-email") == ""

    def test_missing_domain_becomes_empty(self):
        assert sanitize_email("hi@") == ""

    def test_non_string_becomes_empty(self):
        assert sanitize_email(42) == ""


class TestSanitizeUrl:
    def test_https_url_kept(self):
        assert sanitize_url("https://acme.com/contact") == "https://acme.com/contact"

    def test_http_url_kept(self):
        assert sanitize_url("http://acme.com") == "http://acme.com"

    def test_relative_url_rejected(self):
        assert sanitize_url("/contact") == ""

    def test_disallowed_scheme_rejected(self):
        assert sanitize_url("javascript:alert(1)") == ""

    def test_url_with_spaces_rejected(self):
        assert sanitize_url("https://acme.com/contact us") == ""

    def test_malformed_ipv6_rejected(self):
        assert sanitize_url("http://[::1") == ""


class TestAbsint:
    def test_numeric_string(self):
        assert absint("25") == 25

    def test_negative_becomes_positive(self):
        assert absint("-5") == 5

    def test_leading_digits_used(self):
        assert absint("12px") == 12

    def test_non_numeric_is_zero(self):
        assert absint("abc") == 0

    def test_float_truncated(self):
        assert absint(3.7) == 3

    def test_none_is_zero(self):
        assert absint(None) == 0


class TestToBool:
    def test_checkbox_values_are_true(self):
        assert to_bool("1") is True
        assert to_bool("on") is True

    def test_empty_and_zero_are_false(self):
        assert to_bool("") is False
        assert to_bool("0") is False
        assert to_bool("false") is False

    def test_native_values(self):
        assert to_bool(True) is True
        assert to_bool(False) is False
        assert to_bool(None) is False
