"""Products, the raw materials they use, and their cost and sale price."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from prodcost.materials import MaterialTree


@dataclass
class MaterialUse:
    """How many units of a raw material a product needs."""

    material_code: int
    quantity: int


@dataclass
class Product:
    """A product with a profit margin (percent) and its material uses.

    The most recently added material use comes first.
    """

    code: int
    name: str
    margin: float
    uses: list[MaterialUse] = field(default_factory=list)

    def _use(self, material_code: int) -> Optional[MaterialUse]:
        return next((u for u in self.uses if u.material_code == material_code), None)

    def add_material(self, material_code: int, quantity: int) -> None:
        """Add a material use, or set its quantity if it is already listed."""
        use = self._use(material_code)
        if use is not None:
            use.quantity = quantity
        else:
            self.uses.insert(0, MaterialUse(material_code, quantity))

    def remove_material(self, material_code: int) -> None:
        use = self._use(material_code)
        if use is not None:
            self.uses.remove(use)

    def update_material(self, material_code: int, quantity: int) -> None:
        """Set the quantity of a listed material; unlisted codes are ignored."""
        use = self._use(material_code)
        if use is not None:
            use.quantity = quantity

    def update(self, name: str, margin: float) -> None:
        self.name = name
        self.margin = margin

    def cost(self, materials: MaterialTree) -> float:
        """Total cost of the known materials; unknown codes add nothing."""
        total = 0.0
        for use in self.uses:
            material = materials.find(use.material_code)
            if material is not None:
                total += use.quantity * material.price
        return total

    def sale_price(self, materials: MaterialTree) -> float:
        return self.cost(materials) * (1 + self.margin / 100)

    def _header(self) -> str:
        return f"Codigo: {self.code} | Nome: {self.name} | Margem Lucro: {self.margin:.2f}%"

    def material_lines(self, materials: MaterialTree) -> list[str]:
        lines = ["  Matérias-primas:"]
        for use in self.uses:
            material = materials.find(use.material_code)
            if material is None:
                lines.append(f"    Codigo: {use.material_code} | (não encontrada)")
            else:
                lines.append(
                    f"    Codigo: {material.code} | Nome: {material.name} | "
                    f"Qtde: {use.quantity} | Preço un.: {material.price:.2f} | "
                    f"Custo: {use.quantity * material.price:.2f}"
                )
        return lines

    def details(self, materials: MaterialTree) -> list[str]:
        cost = self.cost(materials)
        return [
            self._header(),
            *self.material_lines(materials),
            f"Custo total: {cost:.2f}",
            f"Preço de venda: {cost * (1 + self.margin / 100):.2f}",
        ]


class ProductCatalog:
    """Products, newest first; codes are not required to be unique."""

    def __init__(self) -> None:
        self._products: list[Product] = []

    def insert(self, code: int, name: str, margin: float) -> Product:
        product = Product(code, name, margin)
        self._products.insert(0, product)
        return product

    def find(self, code: int) -> Optional[Product]:
        return next((p for p in self._products if p.code == code), None)

    def remove(self, code: int) -> None:
        """Remove the first product with this code, if any."""
        product = self.find(code)
        if product is not None:
            self._products.remove(product)

    def __iter__(self) -> Iterator[Product]:
        return iter(self._products)

    def __len__(self) -> int:
        return len(self._products)

    def listing(self, materials: MaterialTree) -> list[str]:
        lines = ["", "--- Lista de Produtos ---"]
        for product in self._products:
            lines.append(product._header())
            lines.extend(product.material_lines(materials))
            lines.append(
                f"Custo total: {product.cost(materials):.2f} | "
                f"Preço de venda: {product.sale_price(materials):.2f}"
            )
            lines.append("------")
        return lines