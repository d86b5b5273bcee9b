import pytest

from prodcost.cli import main, run_menu
from prodcost.materials import MaterialTree, format_material, load_materials
from prodcost.persistence import load_products
from prodcost.products import ProductCatalog


def _feed(monkeypatch, answers):
    remaining = iter(answers)

    def fake_input(prompt=""):
        print(prompt, end="")
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("builtins.input", fake_input)


@pytest.fixture
def paths(tmp_path):
    return tmp_path / "produtos.csv", tmp_path / "materias_primas.csv"


def test_insert_product_and_save(monkeypatch, paths):
    products_path, materials_path = paths
    catalog = ProductCatalog()
    _feed(monkeypatch, ["1", "10", "Mesa", "20", "1", "5", "2", "0", "1", "0"])
    run_menu(catalog, MaterialTree(), products_path, materials_path)
    assert products_path.read_text(encoding="utf-8") == "10,Mesa,20.00,5:2;\n"
    product = catalog.find(10)
    assert [(u.material_code, u.quantity) for u in product.uses] == [(5, 2)]


def test_insert_product_without_saving(monkeypatch, paths):
    products_path, materials_path = paths
    catalog = ProductCatalog()
    _feed(monkeypatch, ["1", "3", "Banco", "5", "0", "0", "0"])
    run_menu(catalog, MaterialTree(), products_path, materials_path)
    assert catalog.find(3).name == "Banco"
    assert not products_path.exists()


def test_insert_material_and_save(monkeypatch, paths):
    products_path, materials_path = paths
    materials = MaterialTree()
    _feed(monkeypatch, ["6", "3", "Madeira", "2.5", "1", "0"])
    run_menu(ProductCatalog(), materials, products_path, materials_path)
    assert materials_path.read_text(encoding="utf-8") == "3,Madeira,2.50\n"
    assert load_materials(materials_path).find(3) == materials.find(3)


def test_show_product_details(monkeypatch, paths, capsys):
    materials = MaterialTree()
    materials.insert(1, "Aco", 2.0)
    catalog = ProductCatalog()
    catalog.insert(4, "Grade", 50.0).add_material(1, 3)
    _feed(monkeypatch, ["5", "4", "0"])
    run_menu(catalog, materials, *paths)
    out = capsys.readouterr().out
    for line in catalog.find(4).details(materials):
        assert line in out


def test_unknown_product_message(monkeypatch, paths, capsys):
    _feed(monkeypatch, ["5", "99", "0"])
    run_menu(ProductCatalog(), MaterialTree(), *paths)
    assert "Produto nao encontrado!" in capsys.readouterr().out


def test_alter_product_and_uses(monkeypatch, paths):
    catalog = ProductCatalog()
    product = catalog.insert(2, "Velho", 1.0)
    product.add_material(7, 1)
    answers = ["2", "2", "Novo", "15", "1", "1", "8", "4", "3", "7", "9", "2", "8", "0", "0", "0"]
    _feed(monkeypatch, answers)
    run_menu(catalog, MaterialTree(), *paths)
    assert (product.name, product.margin) == ("Novo", 15.0)
    assert [(u.material_code, u.quantity) for u in product.uses] == [(7, 9)]


def test_remove_product_and_save(monkeypatch, paths):
    products_path, materials_path = paths
    catalog = ProductCatalog()
    catalog.insert(1, "A", 1.0).add_material(1, 1)
    catalog.insert(2, "B", 1.0).add_material(1, 1)
    _feed(monkeypatch, ["3", "2", "1", "0"])
    run_menu(catalog, MaterialTree(), products_path, materials_path)
    assert [p.code for p in load_products(products_path)] == [1]


def test_alter_and_remove_material(monkeypatch, paths):
    materials = MaterialTree()
    materials.insert(1, "Aco", 2.0)
    materials.insert(2, "Cobre", 4.0)
    _feed(monkeypatch, ["7", "1", "Ferro", "3", "0", "8", "2", "0", "0"])
    run_menu(ProductCatalog(), materials, *paths)
    assert (materials.find(1).name, materials.find(1).price) == ("Ferro", 3.0)
    assert 2 not in materials
    assert not paths[1].exists()


def test_invalid_choice_is_reported(monkeypatch, paths, capsys):
    _feed(monkeypatch, ["abc", "0"])
    run_menu(ProductCatalog(), MaterialTree(), *paths)
    assert "Entrada invalida!" in capsys.readouterr().out


def test_main_loads_files_and_lists(monkeypatch, paths, capsys):
    products_path, materials_path = paths
    materials_path.write_text("1,Aco,3.00\n", encoding="utf-8")
    expected = format_material(load_materials(materials_path).find(1))
    _feed(monkeypatch, ["9", "0"])
    code = main(["--products", str(products_path), "--materials", str(materials_path)])
    out = capsys.readouterr().out
    assert code == 0
    assert expected in out
    assert out.rstrip().endswith("Programa encerrado!")


def test_main_ends_on_end_of_input(monkeypatch, paths, capsys):
    products_path, materials_path = paths
    _feed(monkeypatch, [])
    code = main(["--products", str(products_path), "--materials", str(materials_path)])
    assert code == 0
    assert "Programa encerrado!" in capsys.readouterr().out