"""
Host parsing and the tenant route constraint
"""
import pytest

from app.core.subdomain import (
    extract_subdomain,
    normalize_subdomain,
    subdomain_required,
    subdomains,
)


class TestNormalizeSubdomain:
    @pytest.mark.parametrize("raw, expected", [
        ("AcMe", "acme"),
        ("  demo ", "demo"),
        ("", ""),
        (None, ""),
    ])
    def test_normalizes(self, raw, expected):
        assert normalize_subdomain(raw) == expected

    @pytest.mark.parametrize("raw", ["acme", " MiXeD ", "WWW", "a-b"])
    def test_idempotent(self, raw):
        once = normalize_subdomain(raw)
        assert normalize_subdomain(once) == once


class TestExtractSubdomain:
    @pytest.mark.parametrize("host, expected", [
        ("acme.lvh.me", "acme"),
        ("acme.example.com", "acme"),
        ("ACME.Example.com", "acme"),
        ("acme.lvh.me:3000", "acme"),
        ("a.b.example.com", "a"),
        ("lvh.me", None),
        ("lvh.me:3000", None),
        ("localhost", None),
        ("testserver", None),
        ("127.0.0.1:8000", None),
        ("[::1]:8000", None),
        ("", None),
        (None, None),
    ])
    def test_extract(self, host, expected):
        assert extract_subdomain(host) == expected

    def test_multi_level_labels(self):
        """
        Test: Host with two subdomain labels
        Expected: all labels listed, only the leftmost is the tenant key
        """
        assert subdomains("eu.acme.example.com") == ["eu", "acme"]
        assert extract_subdomain("eu.acme.example.com") == "eu"

    def test_longer_tld(self):
        assert subdomains("acme.example.co.uk", tld_length=2) == ["acme"]
        assert subdomains("example.co.uk", tld_length=2) == []


class TestSubdomainRequired:
    def test_tenant_host_matches(self):
        assert subdomain_required("acme.example.com") is True

    def test_unknown_tenant_host_still_matches(self):
        """The constraint does not look tenants up"""
        assert subdomain_required("unknown.example.com") is True

    @pytest.mark.parametrize("host", [
        "www.example.com",
        "admin.example.com",
        "api.example.com",
        "billing.example.com",
        "WWW.example.com",
    ])
    def test_reserved_does_not_match(self, host):
        assert subdomain_required(host) is False

    @pytest.mark.parametrize("host", ["example.com", "localhost", "10.0.0.1", None])
    def test_apex_does_not_match(self, host):
        assert subdomain_required(host) is False
