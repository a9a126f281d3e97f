"""
Enabled model identifiers

Normalizes the caller-supplied ``models`` query value into the list of
upper-case identifiers every visibility check is evaluated against.

Example:
    >>> parse_enabled_models("mft-2000, mft-5000")
    ['MFT-2000', 'MFT-5000']
"""

from typing import List, Optional, Sequence, Union
from urllib.parse import parse_qs

from ..config import appsettings


def parse_enabled_models(raw: Optional[Union[str, Sequence[str]]]) -> List[str]:
    """
    Parse enabled models from a raw query value

    A repeated query key collapses to its first occurrence; the value is
    expected as one comma-separated string. Never raises.

    Args:
        raw: Query value, list of values (multi-valued key), or None

    Returns:
        Upper-cased identifiers in input order; empty list means "no filter"
    """
    if not raw:
        return []

    value = raw if isinstance(raw, str) else raw[0]
    if not isinstance(value, str) or not value:
        return []

    return [piece.strip().upper() for piece in value.split(',') if piece.strip()]


def parse_query_string(query: str, param: Optional[str] = None) -> List[str]:
    """
    Parse enabled models straight from a URL query string

    Args:
        query: Raw query string, with or without the leading '?'
        param: Query parameter name (default: MODELGATE_QUERY_PARAM)

    Example:
        >>> parse_query_string("?models=mft-2000,mft-5000&lang=en")
        ['MFT-2000', 'MFT-5000']
    """
    values = parse_qs(query.lstrip('?')).get(param or appsettings.query_param)
    return parse_enabled_models(values)
