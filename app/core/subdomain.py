"""
Host parsing helpers for subdomain tenancy
"""
import ipaddress
from typing import List, Optional

from app.core.config import settings


def normalize_subdomain(value) -> str:
    """Lowercase and trim a subdomain; None becomes an empty string"""
    if value is None:
        return ""
    return str(value).strip().lower()


def is_reserved(subdomain: str) -> bool:
    return subdomain in settings.RESERVED_SUBDOMAINS


def _strip_port(host: str) -> str:
    # Bracketed IPv6 literal, e.g. [::1]:8000
    if host.startswith("["):
        return host[1:].split("]", 1)[0]
    if host.count(":") == 1:
        return host.split(":", 1)[0]
    return host


def _is_ip(host: str) -> bool:
    try:
        ipaddress.ip_address(host)
    except ValueError:
        return False
    return True


def subdomains(host: Optional[str], tld_length: Optional[int] = None) -> List[str]:
    """
    Return the subdomain labels of a host, leftmost first

    Examples (tld_length=1):
        "acme.lvh.me"       -> ["acme"]
        "a.b.example.com"   -> ["a", "b"]
        "lvh.me:3000"       -> []
        "127.0.0.1"         -> []
    """
    if tld_length is None:
        tld_length = settings.TLD_LENGTH
    host = _strip_port(normalize_subdomain(host)).rstrip(".")
    if not host or _is_ip(host):
        return []
    labels = host.split(".")
    return labels[: max(len(labels) - (tld_length + 1), 0)]


def extract_subdomain(host: Optional[str]) -> Optional[str]:
    """Leftmost subdomain label of a host, the tenant lookup key"""
    labels = subdomains(host)
    if not labels or not labels[0]:
        return None
    return labels[0]


def subdomain_required(host: Optional[str]) -> bool:
    """
    Route constraint for tenant-scoped routes

    True only when the host carries a subdomain that is not reserved. This
    does not look tenants up; the tenant middleware does that separately.
    """
    sub = extract_subdomain(host)
    if not sub:
        return False
    return not is_reserved(sub)
