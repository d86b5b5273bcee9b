"""Interactive menu for managing products and raw materials."""

from __future__ import annotations

import argparse
from collections.abc import Callable
from dataclasses import dataclass
from os import PathLike
from typing import Optional, Union

from prodcost.materials import MaterialTree, load_materials, save_materials
from prodcost.persistence import load_products, save_products
from prodcost.products import Product, ProductCatalog
from prodcost.prompts import read_float, read_int, read_string

_PathType = Union[str, "PathLike[str]"]

_MENU = """
==== MENU ====
1. Inserir produto
2. Alterar produto
3. Excluir produto
4. Listar produtos
5. Calcular/Exibir produto
6. Inserir materia-prima
7. Alterar materia-prima
8. Excluir materia-prima
9. Listar materias-primas
0. Salvar e sair"""

_SAVE_PROMPT = "Confirma salvar? (1=Sim, 0=Nao) "


def _confirm(prompt: str) -> bool:
    return read_int(prompt) == 1


@dataclass
class _Session:
    catalog: ProductCatalog
    materials: MaterialTree
    products_path: _PathType
    materials_path: _PathType

    def _offer_product_save(self) -> None:
        if _confirm(_SAVE_PROMPT):
            save_products(self.catalog, self.products_path)

    def _offer_material_save(self) -> None:
        if _confirm(_SAVE_PROMPT):
            save_materials(self.materials, self.materials_path)

    def insert_product(self) -> None:
        code = read_int("Codigo produto: ")
        name = read_string("Nome: ")
        margin = read_float("Margem de lucro (%): ")
        product = self.catalog.insert(code, name, margin)
        if _confirm("Deseja adicionar materias-primas? (1=Sim, 0=Nao)"):
            while True:
                material_code = read_int("Codigo matéria: ")
                quantity = read_int("Qtde: ")
                product.add_material(material_code, quantity)
                if not _confirm("Mais uma? (1=Sim, 0=Nao) "):
                    break
        self._offer_product_save()

    def _edit_uses(self, product: Product) -> None:
        print("1-Adicionar 2-Remover 3-Alterar Qtde 0-Sair")
        while (choice := read_int("Escolha: ")) != 0:
            if choice == 1:
                code = read_int("Codigo mat: ")
                product.add_material(code, read_int("Qtde: "))
            elif choice == 2:
                product.remove_material(read_int("Codigo mat: "))
            elif choice == 3:
                code = read_int("Codigo mat: ")
                product.update_material(code, read_int("Qtde: "))

    def alter_product(self) -> None:
        product = self.catalog.find(read_int("Codigo produto: "))
        if product is None:
            print("Produto nao encontrado!")
            return
        name = read_string("Novo nome: ")
        margin = read_float("Nova margem: ")
        product.update(name, margin)
        if _confirm("Alterar materias-primas? (1=Sim, 0=Nao)"):
            self._edit_uses(product)
        self._offer_product_save()

    def remove_product(self) -> None:
        self.catalog.remove(read_int("Codigo produto: "))
        self._offer_product_save()

    def list_products(self) -> None:
        for line in self.catalog.listing(self.materials):
            print(line)

    def show_product(self) -> None:
        product = self.catalog.find(read_int("Codigo produto: "))
        if product is None:
            print("Produto nao encontrado!")
            return
        for line in product.details(self.materials):
            print(line)

    def insert_material(self) -> None:
        code = read_int("Codigo materia: ")
        name = read_string("Nome: ")
        price = read_float("Preco: ")
        self.materials.insert(code, name, price)
        self._offer_material_save()

    def alter_material(self) -> None:
        material = self.materials.find(read_int("Codigo materia: "))
        if material is None:
            print("Materia-prima nao encontrada!")
            return
        material.name = read_string("Novo nome: ")
        material.price = read_float("Novo preco: ")
        self._offer_material_save()

    def remove_material(self) -> None:
        self.materials.remove(read_int("Codigo materia: "))
        self._offer_material_save()

    def list_materials(self) -> None:
        for line in self.materials.listing():
            print(line)

    def actions(self) -> dict[int, Callable[[], None]]:
        return {
            1: self.insert_product,
            2: self.alter_product,
            3: self.remove_product,
            4: self.list_products,
            5: self.show_product,
            6: self.insert_material,
            7: self.alter_material,
            8: self.remove_material,
            9: self.list_materials,
        }


def run_menu(
    catalog: ProductCatalog,
    materials: MaterialTree,
    products_path: _PathType,
    materials_path: _PathType,
) -> None:
    """Run the menu until the user chooses 0; changes are saved only when confirmed."""
    session = _Session(catalog, materials, products_path, materials_path)
    actions = session.actions()
    while True:
        print(_MENU)
        try:
            choice = read_int("Escolha: ")
        except ValueError:
            print("Entrada invalida!")
            continue
        if choice == 0:
            return
        action = actions.get(choice)
        if action is None:
            continue
        try:
            action()
        except ValueError:
            print("Entrada invalida!")


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Product cost and sale price manager.")
    parser.add_argument("--products", default="produtos.csv", help="products CSV file")
    parser.add_argument(
        "--materials", default="materias_primas.csv", help="raw materials CSV file"
    )
    args = parser.parse_args(argv)
    catalog = load_products(args.products)
    materials = load_materials(args.materials)
    try:
        run_menu(catalog, materials, args.products, args.materials)
    except EOFError:
        print()
    print("Programa encerrado!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())