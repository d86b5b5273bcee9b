# prodcost

A small terminal tool for working out what a product costs to make and what
it should sell for.

You keep a catalogue of raw materials, each with a code, a name and a unit
price, and a catalogue of products, each with a code, a name, a profit margin
in percent and a list of the raw materials it uses with their quantities. From
these the tool computes:

- **cost**: the sum of quantity × unit price over the product's materials
  (materials whose code is not in the catalogue are listed as not found and
  add nothing);
- **sale price**: cost × (1 + margin / 100).

## Installing

```
pip install .
```

## Running

```
prodcost
```

By default the program reads `produtos.csv` and `materias_primas.csv` from the
current directory; other files can be given with options:

```
prodcost --products meus_produtos.csv --materials minhas_materias.csv
```

A missing file simply means an empty catalogue. The program then opens a
numbered menu (its prompts are in Portuguese):

```
1. Inserir produto
2. Alterar produto
3. Excluir produto
4. Listar produtos
5. Calcular/Exibir produto
6. Inserir materia-prima
7. Alterar materia-prima
8. Excluir materia-prima
9. Listar materias-primas
0. Salvar e sair
```

After each change you are asked whether to save; answering `1` writes the
matching CSV file, anything else keeps the change in memory only. Choosing
`0` leaves the menu without writing anything further, so answer `1` at the
save prompt for every change you want to keep. Input that is not a number
where one is expected prints `Entrada invalida!` and returns to the menu; the
end of input (Ctrl-D) ends the program.

Inserting a raw material whose code already exists only updates its price.
Text entered at a prompt is cut to 99 characters.

## File formats

Raw materials, one per line, written in ascending code order:

```
1,Farinha,4.50
2,Acucar,3.20
```

Products, one per line; the last field lists `material:quantity` pairs, each
followed by `;`:

```
10,Bolo,35.00,2:1;1:2;
```

Names may not contain commas. Reading a file stops at the first line that
does not parse; for products this includes a product with no materials at
all. Products are written newest first, and each product read is placed in
front of those read before it, so loading reverses the order in the file.

## Using it as a library

```python
from prodcost.materials import MaterialTree
from prodcost.products import ProductCatalog

materials = MaterialTree()
materials.insert(1, "Farinha", 4.5)
materials.insert(2, "Acucar", 3.2)

catalog = ProductCatalog()
cake = catalog.insert(10, "Bolo", 35.0)
cake.add_material(1, 2)
cake.add_material(2, 1)

print(f"{cake.cost(materials):.2f}")        # 12.20
print(f"{cake.sale_price(materials):.2f}")  # 16.47
print("\n".join(cake.details(materials)))
```

- `prodcost.materials`: `RawMaterial`, `MaterialTree` (a balanced search
  tree with `insert`, `remove`, `find`, `height`, iteration in code order,
  `len`, `in` and `listing`), `format_material`, `load_materials`,
  `save_materials`.
- `prodcost.products`: `MaterialUse`, `Product` (`add_material`,
  `remove_material`, `update_material`, `update`, `cost`, `sale_price`,
  `material_lines`, `details`) and `ProductCatalog` (`insert`, `find`,
  `remove`, iteration, `len`, `listing`).
- `prodcost.persistence`: `parse_material_field`, `format_material_field`,
  `load_products`, `save_products`.
- `prodcost.prompts`: `read_int`, `read_float`, `read_string`.
- `prodcost.cli`: `run_menu` and `main`.

## What it does not do

There is no non-interactive mode: every change goes through the menu. Removing
a raw material does not touch the products that use it; they simply list it
as not found. Product codes are not checked for uniqueness.