"""
Domain resolver

Finds the public suffix ("TLD") and the registered root domain of a hostname
or URL using a second-level suffix table.

    >>> get_tld("example.co.uk")
    '.co.uk'
    >>> get_root_domain("https://sub.example.tokyo.jp")
    'tokyo.jp'
"""

import ipaddress
import re
from functools import lru_cache
from typing import Any, Optional, Union
from urllib.parse import urlsplit

from core.exceptions import InvalidHostError
from core.logging import get_logger
from d2_domains.suffix_table import SuffixTable, get_suffix_table

logger = get_logger(__name__, domain="d2")

LABEL_PATTERN = re.compile(r"^[a-z0-9_](?:[a-z0-9_-]{0,61}[a-z0-9_])?$")
MAX_HOSTNAME_LENGTH = 253
PORT_SUFFIX_PATTERN = re.compile(r"^([^:]+):\d+$")

HostInput = Union[str, Any]


class DomainResolver:
    """Resolves TLDs and root domains against an injected suffix table"""

    def __init__(self, suffix_table: Optional[SuffixTable] = None):
        self.suffix_table = suffix_table if suffix_table is not None else get_suffix_table()

    def get_tld(self, hostname: str) -> str:
        """
        Get the recognized suffix of a hostname, including the leading dot.

        The last two labels form a compound suffix when the second-to-last
        label is in the suffix table; otherwise the suffix is the last label.
        A trailing `:port` is ignored.
        """
        cleaned = PORT_SUFFIX_PATTERN.sub(r"\1", self._clean_hostname(hostname))
        labels = self._split_labels(cleaned.rstrip("."), hostname)

        last_two = labels[-2:]
        if len(last_two) == 2 and last_two[0] in self.suffix_table:
            return "." + ".".join(last_two)
        return "." + labels[-1]

    def get_root_domain(self, value: HostInput) -> str:
        """
        Get the registered domain for a hostname, URL string or URL object.

        Args:
            value: Hostname, URL string, or URL object exposing `hostname` or `host`

        Returns:
            The label immediately left of the suffix plus the suffix; single
            label hosts and IP addresses are returned unchanged

        Raises:
            InvalidHostError: If no valid hostname can be extracted
        """
        hostname = self.extract_hostname(value)

        if _is_ip_address(hostname):
            return hostname

        suffix_labels = self.get_tld(hostname).count(".")
        labels = hostname.split(".")
        if len(labels) <= suffix_labels:
            logger.debug(f"No label left of the suffix in {hostname}, returning it unchanged")
            return hostname

        return ".".join(labels[-(suffix_labels + 1) :])

    def extract_hostname(self, value: HostInput) -> str:
        """Coerce a URL object or URL-like string to a validated, lower-cased hostname"""
        if isinstance(value, str):
            hostname = _hostname_from_string(value)
        elif hasattr(value, "hostname"):
            hostname = value.hostname
        elif hasattr(value, "host"):
            hostname = value.host
        else:
            raise InvalidHostError(value, "expected a string or URL object")

        if not isinstance(hostname, str):
            raise InvalidHostError(value, "no hostname")

        hostname = self._clean_hostname(hostname)
        if _is_ip_address(hostname):
            return hostname

        self._split_labels(hostname, value)
        return hostname

    @staticmethod
    def _clean_hostname(hostname: str) -> str:
        if not isinstance(hostname, str):
            raise InvalidHostError(hostname, "hostname must be a string")
        return hostname.strip().lower().rstrip(".")

    @staticmethod
    def _split_labels(hostname: str, original: Any) -> list[str]:
        if not hostname:
            raise InvalidHostError(original, "empty hostname")

        try:
            ascii_hostname = hostname.encode("idna").decode("ascii")
        except UnicodeError as e:
            raise InvalidHostError(original, f"not IDNA encodable: {e}") from e

        if len(ascii_hostname) > MAX_HOSTNAME_LENGTH:
            raise InvalidHostError(original, "hostname too long")

        for label in ascii_hostname.split("."):
            if not LABEL_PATTERN.match(label):
                raise InvalidHostError(original, f"invalid label {label!r}")

        return hostname.split(".")


def _hostname_from_string(value: str) -> Optional[str]:
    candidate = value.strip()
    if not candidate:
        raise InvalidHostError(value, "empty input")

    if candidate.startswith("//"):
        candidate = "http:" + candidate
    elif "://" not in candidate:
        candidate = "http://" + candidate

    try:
        parts = urlsplit(candidate)
        # Accessing the port validates it
        parts.port
    except ValueError as e:
        raise InvalidHostError(value, str(e)) from e

    return parts.hostname


def _is_ip_address(hostname: str) -> bool:
    try:
        ipaddress.ip_address(hostname)
    except ValueError:
        return False
    return True


@lru_cache()
def get_default_resolver() -> DomainResolver:
    """Get the process-wide resolver built on the configured suffix table"""
    return DomainResolver()


def get_tld(hostname: str) -> str:
    """Get the suffix of `hostname` using the process-wide suffix table"""
    return get_default_resolver().get_tld(hostname)


def get_root_domain(value: HostInput) -> str:
    """Get the root domain of `value` using the process-wide suffix table"""
    return get_default_resolver().get_root_domain(value)
