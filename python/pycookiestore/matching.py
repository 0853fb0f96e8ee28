"""Domain, path and origin matching rules.

Query-time matching is a plain suffix test without a label boundary check, so host `evilexample.com` matches
domain `example.com`. Delete-time matching is an exact comparison that tolerates a single leading dot on either
side. Both rules are kept as they are, callers depend on the loose query behavior. Hosts and domains are compared
with their case as given.
"""

from urllib.parse import urlsplit

from pycookiestore.cookie import CookieRecord


def extract_host(url: str) -> str | None:
    """Return the host of an absolute URL, or None if there is none. The host keeps its case."""
    try:
        netloc = urlsplit(url).netloc
    except ValueError:
        return None
    host = netloc.rpartition("@")[2]
    if host.startswith("["):
        host = host[1:].partition("]")[0]
    else:
        host = host.partition(":")[0]
    return host or None


def host_matches_domain(host: str, cookie_domain: str) -> bool:
    """Whether a cookie stored for cookie_domain applies to requests to host."""
    return host.endswith(cookie_domain) or f".{host}".endswith(cookie_domain)


def domain_matches_for_delete(target_domain: str, cookie_domain: str) -> bool:
    """Whether a deletion request for target_domain identifies a cookie stored for cookie_domain."""
    return (
        target_domain == cookie_domain
        or target_domain == f".{cookie_domain}"
        or f".{target_domain}" == cookie_domain
    )


def origin_matches(origin_url: str | None, url: str) -> bool:
    """Whether a record set against origin_url may be deleted by a request naming url.

    Records without an origin match any url.
    """
    return not origin_url or origin_url == url


def matches_delete(record: CookieRecord, url: str | None, domain: str, path: str, name: str | None = None) -> bool:
    """Whether record is identified by a deletion request.

    A None url skips the origin check and a None name matches every name.
    """
    if url is not None and not origin_matches(record.origin_url, url):
        return False
    if name is not None and record.name != name:
        return False
    return record.path == path and domain_matches_for_delete(domain, record.domain)
