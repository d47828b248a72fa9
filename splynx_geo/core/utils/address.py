"""
Address normalization and canonicalization utilities.

The canonical address is the single-line string used both as the geocoding
query and as the value compared against the geo address stored in Splynx.

Usage:
    from splynx_geo.core.utils.address import canonicalize

    canonical = canonicalize(None, None, "123 main street", "auckland")
    canonical.address        # "123 Main Street, Auckland"
    canonical.used_fallback  # True
"""

import re
from dataclasses import dataclass
from typing import Optional

# First non-space character of each whitespace-separated word
WORD_START_PATTERN = re.compile(r'(^|\s)(\S)')


@dataclass(frozen=True)
class CanonicalAddress:
    """Normalized street/town plus the single-line address built from them."""

    street: str
    town: str
    address: str
    used_fallback: bool = False


def title_case_words(value: Optional[str]) -> str:
    """
    Lower-case a value, then upper-case the first character of every word.

    Words are split on whitespace only, so "o'brien road" becomes
    "O'brien Road" and "12a high st" becomes "12a High St". Whitespace is
    preserved as-is.

    Args:
        value: Raw street or town text (None allowed)

    Returns:
        Normalized text, or empty string if input is None/empty

    Example:
        >>> title_case_words("123 MAIN street")
        "123 Main Street"
    """
    if not value:
        return ""

    return WORD_START_PATTERN.sub(
        lambda m: m.group(1) + m.group(2).upper(),
        value.lower()
    )


def compose_address(street: str, town: str) -> str:
    """
    Join street and town into one line.

    Returns "" when there is no street, the street alone when there is no
    town, otherwise "street, town".
    """
    if not street:
        return ""
    if not town:
        return street
    return f"{street}, {town}"


def canonicalize(
    install_street: Optional[str],
    install_town: Optional[str],
    customer_street: Optional[str],
    customer_city: Optional[str],
) -> CanonicalAddress:
    """
    Build the canonical address for a service.

    If the service has no install street, the customer's street and city are
    used instead and `used_fallback` is set.

    Args:
        install_street: Service `installstreet` attribute
        install_town: Service `installtown` attribute
        customer_street: Customer `street_1`
        customer_city: Customer `city`

    Returns:
        CanonicalAddress with normalized street/town and the composed address
    """
    used_fallback = False
    street, town = install_street, install_town

    if not street:
        street, town = customer_street, customer_city
        used_fallback = True

    street = title_case_words(street)
    town = title_case_words(town)

    return CanonicalAddress(
        street=street,
        town=town,
        address=compose_address(street, town),
        used_fallback=used_fallback,
    )
