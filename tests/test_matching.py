import pytest
from pycookiestore.cookie import CookieRecord
from pycookiestore.matching import (
    domain_matches_for_delete,
    extract_host,
    host_matches_domain,
    matches_delete,
    origin_matches,
)

DOMAINS = ["a.com", "example.com", "www.example.co.uk", "localhost", "127.0.0.1"]


@pytest.mark.parametrize(
    "url,expected",
    [
        ("http://a.com", "a.com"),
        ("http://A.COM/Path", "A.COM"),
        ("https://user@Www.Example.com:8443", "Www.Example.com"),
        ("https://www.example.com:8443/path?q=1", "www.example.com"),
        ("http://user:pw@host.test/", "host.test"),
        ("http://[::1]:8080/", "::1"),
        ("", None),
        ("a.com", None),
        ("/relative/path", None),
        ("http:///nohost", None),
        ("http://[::1", None),
    ],
)
def test_extract_host(url: str, expected: str | None):
    assert extract_host(url) == expected


@pytest.mark.parametrize("domain", DOMAINS)
def test_host_matches_domain__reflexive(domain: str):
    assert host_matches_domain(domain, domain) is True
    assert host_matches_domain(f"sub.{domain}", domain) is True


def test_host_matches_domain__leading_dot():
    assert host_matches_domain("www.example.com", ".example.com") is True
    assert host_matches_domain("example.com", ".example.com") is True
    assert host_matches_domain("sub.a.com", ".a.com") is True


def test_host_matches_domain__plain_suffix():
    # No label boundary check
    assert host_matches_domain("evilexample.com", "example.com") is True
    assert host_matches_domain("example.com", "www.example.com") is False
    assert host_matches_domain("a.com", "b.com") is False
    assert host_matches_domain("a.com", ".sub.a.com") is False


@pytest.mark.parametrize("domain", DOMAINS)
def test_domain_matches_for_delete__dotted_variants(domain: str):
    assert domain_matches_for_delete(domain, domain) is True
    assert domain_matches_for_delete(domain, f".{domain}") is True
    assert domain_matches_for_delete(f".{domain}", domain) is True
    assert domain_matches_for_delete(domain, "other") is False


def test_domain_matches_for_delete__exact_not_suffix():
    assert domain_matches_for_delete("example.com", "www.example.com") is False
    assert domain_matches_for_delete("www.example.com", "example.com") is False
    assert domain_matches_for_delete("..a.com", "a.com") is False
    assert domain_matches_for_delete("a.com", "..a.com") is False


@pytest.mark.parametrize(
    "origin,url,expected",
    [
        (None, "http://a.com", True),
        ("", "http://a.com", True),
        ("http://a.com", "http://a.com", True),
        ("http://a.com", "http://a.com/", False),
        ("http://a.com", "http://b.com", False),
        ("http://a.com", "", False),
    ],
)
def test_origin_matches(origin: str | None, url: str, expected: bool):
    assert origin_matches(origin, url) is expected


def test_matches_delete():
    record = CookieRecord("sid", "1", ".a.com", "/", origin_url="http://a.com")
    assert matches_delete(record, "http://a.com", "a.com", "/", name="sid") is True
    assert matches_delete(record, "http://a.com", "a.com", "/") is True
    assert matches_delete(record, "http://a.com", "a.com", "/", name="other") is False
    assert matches_delete(record, "http://a.com", "a.com", "/path") is False
    assert matches_delete(record, "http://b.com", "a.com", "/") is False
    assert matches_delete(record, "", "a.com", "/") is False
    assert matches_delete(record, None, "a.com", "/") is True
    assert matches_delete(record, None, "a.com", "/", name="sid") is True


def test_host_matches_domain__case_as_given():
    assert host_matches_domain(extract_host("http://A.COM"), "A.COM") is True
    assert host_matches_domain(extract_host("http://sub.A.COM"), ".A.COM") is True
