"""CSV storage for products and the raw materials each one uses.

A product line reads ``code,name,margin,mat:qty;mat:qty;``.
"""

from __future__ import annotations

import re
from os import PathLike
from typing import Union

from prodcost.products import Product, ProductCatalog

_PathType = Union[str, "PathLike[str]"]

_PRODUCT = re.compile(
    r"\s*([+-]?\d+),([^,]{1,99}),\s*"
    r"([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?),"
    r"([^\n]{1,499})\s*"
)
_USE = re.compile(r"\s*([+-]?\d+):\s*([+-]?\d+)")


def parse_material_field(text: str) -> list[tuple[int, int]]:
    """Read ``code:quantity`` pairs separated by ';', stopping at the first bad one."""
    pairs: list[tuple[int, int]] = []
    position = 0
    while (match := _USE.match(text, position)) is not None:
        pairs.append((int(match.group(1)), int(match.group(2))))
        separator = text.find(";", position)
        if separator < 0:
            break
        position = separator + 1
    return pairs


def format_material_field(product: Product) -> str:
    """Render a product's material uses as ``code:quantity;`` entries."""
    return "".join(f"{use.material_code}:{use.quantity};" for use in product.uses)


def load_products(path: _PathType) -> ProductCatalog:
    """Read products from a CSV file; a missing file gives an empty catalog.

    Each product read is placed in front of those read before it. Reading
    stops at the first line that does not parse, which includes a product
    with an empty material field.
    """
    catalog = ProductCatalog()
    try:
        with open(path, encoding="utf-8") as handle:
            text = handle.read()
    except OSError:
        return catalog
    position = 0
    while (match := _PRODUCT.match(text, position)) is not None:
        code, name, margin, field = match.groups()
        product = catalog.insert(int(code), name, float(margin))
        for material_code, quantity in parse_material_field(field):
            product.add_material(material_code, quantity)
        position = match.end()
    return catalog


def save_products(catalog: ProductCatalog, path: _PathType) -> None:
    """Write every product, in catalog order, one line each."""
    with open(path, "w", encoding="utf-8") as handle:
        for product in catalog:
            handle.write(
                f"{product.code},{product.name},{product.margin:.2f},"
                f"{format_material_field(product)}\n"
            )