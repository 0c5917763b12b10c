"""Field coercion helpers for the legacy XML API.

Each helper pulls one child element's text out of an XML node and converts it.
``*_req`` helpers raise :class:`DataError` naming the element when it is
missing or malformed; ``*_optional`` helpers return None instead and never
raise.
"""

import re
import xml.etree.ElementTree as ET

from tvdbclient.errors import DataError
from tvdbclient.models.common import Date

_UNSIGNED_RE = re.compile(r"\+?[0-9]+")


def intify(text: str) -> int:
    """Turn ``"123"`` into ``123``.

    Raises:
        ValueError: If *text* is not an unsigned integer.
    """
    if not _UNSIGNED_RE.fullmatch(text):
        raise ValueError(f"invalid unsigned integer: {text!r}")
    return int(text)


def floatify(text: str) -> float:
    """Turn ``"123.1"`` into ``123.1``."""
    return float(text)


def parse_date(text: str) -> Date:
    """Parse a ``YYYY-MM-DD`` string into a :class:`Date`.

    Raises:
        DataError: If *text* does not have three dash-separated numeric parts.
    """
    chunks = text.split("-")
    if len(chunks) != 3:
        raise DataError(f"Malformed YYYY-MM-DD date: {text}")
    try:
        year, month, day = (intify(chunk) for chunk in chunks)
    except ValueError as e:
        raise DataError(f"Malformed YYYY-MM-DD date: {text}") from e
    return Date(year=year, month=month, day=day)


def get_text_optional(node: ET.Element, name: str) -> str | None:
    """Get text from element, or return None."""
    child = node.find(name)
    if child is None or not child.text:
        return None
    return child.text


def get_text_req(node: ET.Element, name: str) -> str:
    """Get text from element, or raise DataError."""
    text = get_text_optional(node, name)
    if text is None:
        raise DataError(f"Element {name} missing")
    return text


def get_int_optional(node: ET.Element, name: str) -> int | None:
    text = get_text_optional(node, name)
    if text is None:
        return None
    try:
        return intify(text)
    except ValueError:
        return None


def get_int_req(node: ET.Element, name: str) -> int:
    text = get_text_req(node, name)
    try:
        return intify(text)
    except ValueError as e:
        raise DataError(f"Error parsing {name}: {e}") from e


def get_float_optional(node: ET.Element, name: str) -> float | None:
    text = get_text_optional(node, name)
    if text is None:
        return None
    try:
        return floatify(text)
    except ValueError:
        return None


def get_date_optional(node: ET.Element, name: str) -> Date | None:
    """Get a date from element; malformed dates are treated as absent."""
    text = get_text_optional(node, name)
    if text is None:
        return None
    try:
        return parse_date(text)
    except DataError:
        return None
