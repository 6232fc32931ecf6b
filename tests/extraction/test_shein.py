"""Tests for cartlink/extraction/shein.py"""

from urllib.parse import quote

import pytest

from cartlink.extraction.shein import decode_component, extract_shein_url, get_query_param


class TestDecodedProductLink:
    def test_encoded_product_url(self, shein_redirect):
        url = f"{shein_redirect}?link=https%3A%2F%2Fwww.shein.com%2Fp%2Ftest-product-123.html"
        result = extract_shein_url(url)
        assert result.is_valid is True
        assert result.platform == "shein"
        assert result.extracted_url == "https://www.shein.com/p/test-product-123.html"
        assert result.original_url == url

    def test_encoded_product_url_with_query(self, shein_redirect):
        url = (
            f"{shein_redirect}?link=https%3A%2F%2Fwww.shein.com%2Fp%2Ftest-product-123.html"
            "%3Fcolor%3Dred%26size%3Dm&localcountry=JO"
        )
        result = extract_shein_url(url)
        assert result.is_valid is True
        assert result.extracted_url == "https://www.shein.com/p/test-product-123.html?color=red&size=m"

    def test_once_nested_redirect_resolves_at_first_decode(self, shein_redirect):
        url = (
            f"{shein_redirect}?link=http%3A%2F%2Fapi-shein.shein.com%2Fh5%2Fsharejump%2Fappjump"
            "%3Flink%3Dhttps%253A%252F%252Fwww.shein.com%252Fp%252Ftest-product-123.html"
        )
        result = extract_shein_url(url)
        assert result.is_valid is True
        assert "shein.com" in result.extracted_url
        assert "/p/" in result.extracted_url

    def test_mobile_host(self, shein_redirect):
        url = f"{shein_redirect}?link=https%3A%2F%2Fm.shein.com%2Fp%2Fabc.html"
        assert extract_shein_url(url).extracted_url == "https://m.shein.com/p/abc.html"


class TestNestedRedirect:
    def test_unwraps_second_level(self, nested_shein_redirect):
        url, product = nested_shein_redirect
        result = extract_shein_url(url)
        assert result.is_valid is True
        assert result.extracted_url == product

    def test_nested_without_product_is_unresolvable(self, shein_redirect):
        inner = f"{shein_redirect}?link=not%20a%20product"
        url = f"{shein_redirect}?link={quote(quote(inner, safe=''), safe='')}"
        result = extract_shein_url(url)
        assert result.is_valid is False
        assert result.error == "Could not extract valid SHEIN product URL"


class TestShortCodeFallback:
    def test_short_code(self, shein_redirect):
        result = extract_shein_url(f"{shein_redirect}?link=l4EWUh4InsA_8_1&localcountry=JO")
        assert result.is_valid is True
        assert result.extracted_url == "https://www.shein.com/p/l4EWUh4InsA_8_1.html"

    def test_sentinel_is_rejected(self, shein_redirect):
        result = extract_shein_url(f"{shein_redirect}?link=not-a-shein-url")
        assert result.is_valid is False
        assert result.platform == "shein"
        assert result.error == "Could not extract valid SHEIN product URL"

    def test_non_code_characters_rejected(self, shein_redirect):
        result = extract_shein_url(f"{shein_redirect}?link=abc.def")
        assert result.error == "Could not extract valid SHEIN product URL"


class TestMissingLink:
    def test_other_params_only(self, shein_redirect):
        result = extract_shein_url(f"{shein_redirect}?invalid=param")
        assert result.is_valid is False
        assert result.platform == "shein"
        assert result.error == "No product link found in SHEIN redirect URL"

    def test_no_query(self, shein_redirect):
        result = extract_shein_url(shein_redirect)
        assert result.error == "No product link found in SHEIN redirect URL"

    def test_empty_link(self, shein_redirect):
        result = extract_shein_url(f"{shein_redirect}?link=")
        assert result.error == "No product link found in SHEIN redirect URL"


class TestParseFailure:
    def test_malformed_percent_escape(self, shein_redirect):
        result = extract_shein_url(f"{shein_redirect}?link=%25zz")
        assert result.is_valid is False
        assert result.platform == "shein"
        assert result.error == "Failed to parse SHEIN redirect URL"

    def test_broken_nested_host(self, shein_redirect):
        link = quote(quote("http://[api-shein.shein.com/h5", safe=''), safe='')
        result = extract_shein_url(f"{shein_redirect}?link={link}")
        assert result.error == "Failed to parse SHEIN redirect URL"

    def test_bad_port(self):
        result = extract_shein_url("http://api-shein.shein.com:abc/h5/sharejump/appjump?link=x")
        assert result.error == "Failed to parse SHEIN redirect URL"


class TestHelpers:
    def test_get_query_param_first_value(self):
        assert get_query_param("https://a.com/?link=1&link=2", "link") == "1"

    def test_get_query_param_missing(self):
        assert get_query_param("https://a.com/?x=1", "link") is None

    def test_get_query_param_relative_url_raises(self):
        with pytest.raises(ValueError):
            get_query_param("no-scheme?link=1", "link")

    def test_decode_component(self):
        assert decode_component("a%2Fb%20c") == "a/b c"

    def test_decode_component_invalid_utf8_raises(self):
        with pytest.raises(ValueError):
            decode_component("%C3%28")
