"""Raw materials kept in a self-balancing (AVL) search tree keyed by code."""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass
from os import PathLike
from typing import Optional, Union

_PathType = Union[str, "PathLike[str]"]

# One record: code,name,price with the same leniency as a scanf-style reader.
_RECORD = re.compile(
    r"\s*([+-]?\d+),([^,]{1,99}),\s*"
    r"([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)\s*"
)


@dataclass
class RawMaterial:
    """A raw material with its unit price."""

    code: int
    name: str
    price: float


@dataclass
class _Node:
    material: RawMaterial
    left: Optional[_Node] = None
    right: Optional[_Node] = None


def _height(node: Optional[_Node]) -> int:
    if node is None:
        return 0
    return 1 + max(_height(node.left), _height(node.right))


def _balance_factor(node: _Node) -> int:
    return _height(node.left) - _height(node.right)


def _rotate_right(node: _Node) -> _Node:
    pivot = node.left
    assert pivot is not None
    node.left = pivot.right
    pivot.right = node
    return pivot


def _rotate_left(node: _Node) -> _Node:
    pivot = node.right
    assert pivot is not None
    node.right = pivot.left
    pivot.left = node
    return pivot


def _rebalance(node: _Node) -> _Node:
    factor = _balance_factor(node)
    if factor > 1:
        assert node.left is not None
        if _balance_factor(node.left) < 0:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if factor < -1:
        assert node.right is not None
        if _balance_factor(node.right) > 0:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def _insert(node: Optional[_Node], code: int, name: str, price: float) -> _Node:
    if node is None:
        return _Node(RawMaterial(code, name, price))
    if code < node.material.code:
        node.left = _insert(node.left, code, name, price)
    elif code > node.material.code:
        node.right = _insert(node.right, code, name, price)
    else:
        node.material.price = price
    return _rebalance(node)


def _remove(node: Optional[_Node], code: int) -> Optional[_Node]:
    if node is None:
        return None
    if code < node.material.code:
        node.left = _remove(node.left, code)
    elif code > node.material.code:
        node.right = _remove(node.right, code)
    else:
        if node.left is None:
            return node.right
        if node.right is None:
            return node.left
        successor = node.right
        while successor.left is not None:
            successor = successor.left
        node.material = successor.material
        node.right = _remove(node.right, successor.material.code)
    return _rebalance(node)


class MaterialTree:
    """Raw materials ordered by code, balanced on every change."""

    def __init__(self) -> None:
        self._root: Optional[_Node] = None

    def insert(self, code: int, name: str, price: float) -> None:
        """Add a material; an existing code only has its price updated."""
        self._root = _insert(self._root, code, name, price)

    def remove(self, code: int) -> None:
        """Remove the material with this code, if present."""
        self._root = _remove(self._root, code)

    def find(self, code: int) -> Optional[RawMaterial]:
        node = self._root
        while node is not None:
            if code < node.material.code:
                node = node.left
            elif code > node.material.code:
                node = node.right
            else:
                return node.material
        return None

    def height(self) -> int:
        return _height(self._root)

    def __iter__(self) -> Iterator[RawMaterial]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.material
            node = node.right

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __contains__(self, code: object) -> bool:
        return isinstance(code, int) and self.find(code) is not None

    def listing(self) -> list[str]:
        """One display line per material, in code order."""
        return [format_material(material) for material in self]


def format_material(material: RawMaterial) -> str:
    return f"Codigo: {material.code} | Nome: {material.name} | Preço: {material.price:.2f}"


def load_materials(path: _PathType) -> MaterialTree:
    """Read materials from a CSV file; a missing file gives an empty tree.

    Reading stops at the first record that does not parse.
    """
    tree = MaterialTree()
    try:
        with open(path, encoding="utf-8") as handle:
            text = handle.read()
    except OSError:
        return tree
    position = 0
    while (match := _RECORD.match(text, position)) is not None:
        code, name, price = match.groups()
        tree.insert(int(code), name, float(price))
        position = match.end()
    return tree


def save_materials(tree: MaterialTree, path: _PathType) -> None:
    """Write every material as a code,name,price line in code order."""
    with open(path, "w", encoding="utf-8") as handle:
        for material in tree:
            handle.write(f"{material.code},{material.name},{material.price:.2f}\n")