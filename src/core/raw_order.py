"""
Field access for raw order payloads.

Raw orders arrive as plain mappings. The demo carts API and hand-written
fixtures name the same fields differently, so each logical field has an
ordered list of accepted keys.
"""

from typing import Any, Mapping

RawOrder = Mapping[str, Any]

FIELD_ALIASES: dict[str, tuple[str, ...]] = {
    "id": ("id",),
    "total": ("total",),
    "line_items": ("lineItems", "products", "line_items"),
    "total_units": ("totalUnits", "totalProducts", "total_units"),
}


def get_field(raw: RawOrder, name: str) -> Any:
    """
    Return the first present alias of a logical field, or None.

    >>> get_field({"products": [1, 2]}, "line_items")
    [1, 2]
    """
    for key in FIELD_ALIASES.get(name, (name,)):
        if key in raw:
            return raw[key]
    return None
