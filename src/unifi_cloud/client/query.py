"""Query string encoding for the UniFi Cloud API."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from urllib.parse import quote_plus

QueryValue = str | int | float | bool
QueryParams = Mapping[str, QueryValue | Sequence[QueryValue]]


def _scalar(value: QueryValue) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(value)


def encode_query(params: QueryParams) -> str:
    """Encode *params* as a query string.

    Sequence values are repeated as ``key[]=value`` pairs in order. Key
    order follows the mapping. Empty values are not filtered here; callers
    drop them before encoding.
    """
    pairs: list[str] = []
    for key, value in params.items():
        name = quote_plus(str(key))
        if isinstance(value, Sequence) and not isinstance(value, str):
            for item in value:
                pairs.append(f"{name}[]={quote_plus(_scalar(item))}")
        else:
            pairs.append(f"{name}={quote_plus(_scalar(value))}")
    return "&".join(pairs)
