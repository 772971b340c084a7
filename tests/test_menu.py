import uuid

from app.db.models import Category, ChoiceGroup, ChoiceOption, Product


async def add_category(client, name):
    response = await client.post("/menu/categories", json={"name": name})
    assert response.status_code == 201, response.text
    return response.json()


async def add_product(client, category_id, **payload):
    response = await client.post(f"/menu/categories/{category_id}/products", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


async def add_choice_group(client, product_id, **payload):
    response = await client.post(f"/menu/products/{product_id}/choices", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


async def add_option(client, group_id, **payload):
    response = await client.post(f"/menu/choices/{group_id}/options", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


async def test_empty_menu(client):
    response = await client.get("/menu")

    assert response.status_code == 200
    assert response.json() == []


async def test_categories_keep_creation_order(client):
    lanches = await add_category(client, "Lanches")
    await add_category(client, "Bebidas")

    menu = (await client.get("/menu")).json()
    categories = (await client.get("/menu/categories")).json()

    assert lanches["items"] == []
    assert lanches["schedule_available"] == "1111111"
    assert lanches["schedule_type"] == 0
    assert [c["name"] for c in menu] == ["Lanches", "Bebidas"]
    assert categories == [
        {"id": menu[0]["id"], "name": "Lanches", "img": None},
        {"id": menu[1]["id"], "name": "Bebidas", "img": None},
    ]


async def test_category_name_is_required(client):
    response = await client.post("/menu/categories", json={"name": "   "})

    assert response.status_code == 400
    assert response.json() == {"error": "Nome da categoria é obrigatório"}


async def test_update_category(client):
    category = await add_category(client, "Lanches")

    response = await client.put(f"/menu/categories/{category['id']}", json={"name": "Sanduíches", "img": "https://cdn.test/s.png"})
    missing = await client.put(f"/menu/categories/{uuid.uuid4()}", json={"name": "X"})

    assert response.status_code == 200
    assert response.json()["name"] == "Sanduíches"
    assert response.json()["img"] == "https://cdn.test/s.png"
    assert missing.status_code == 404


async def test_product_defaults(client):
    category = await add_category(client, "Lanches")

    product = await add_product(client, category["id"])

    assert product["name"] == "Novo Produto"
    assert product["price"] == 0
    assert product["promotional_price"] is None
    assert product["choices"] == []
    assert product["category_id"] == category["id"]


async def test_product_in_unknown_category(client):
    response = await client.post(f"/menu/categories/{uuid.uuid4()}/products", json={"name": "X-Burger"})

    assert response.status_code == 404
    assert response.json() == {"error": "Categoria não encontrada"}


async def test_full_menu_is_nested_in_display_order(client):
    category = await add_category(client, "Pizzas")
    calabresa = await add_product(client, category["id"], name="Calabresa", price=45.9, description="Molho e calabresa")
    await add_product(client, category["id"], name="Margherita", price=42, promotional_price=39.9)
    borda = await add_choice_group(client, calabresa["id"], name="Borda", required=True, min=1, max=1)
    await add_choice_group(client, calabresa["id"], name="Adicionais", max=3)
    await add_option(client, borda["id"], name="Catupiry", price=8)
    await add_option(client, borda["id"], name="Cheddar", price=7.5, max=2)

    menu = (await client.get("/menu")).json()

    items = menu[0]["items"]
    assert [i["name"] for i in items] == ["Calabresa", "Margherita"]
    assert items[0]["price"] == 45.9
    assert items[1]["promotional_price"] == 39.9
    choices = items[0]["choices"]
    assert [(c["name"], c["required"], c["min"], c["max"]) for c in choices] == [
        ("Borda", True, 1, 1),
        ("Adicionais", False, 0, 3),
    ]
    assert [(o["name"], o["price"], o["max"]) for o in choices[0]["options"]] == [
        ("Catupiry", 8, 1),
        ("Cheddar", 7.5, 2),
    ]

    by_product = (await client.get(f"/menu/products/{calabresa['id']}/choices")).json()
    assert [c["name"] for c in by_product] == ["Borda", "Adicionais"]


async def test_update_product(client):
    category = await add_category(client, "Lanches")
    product = await add_product(client, category["id"], name="X-Burger", price=20)

    response = await client.put(f"/menu/products/{product['id']}", json={"price": 22.5, "description": "Pão brioche"})
    negative = await client.put(f"/menu/products/{product['id']}", json={"price": -1})

    assert response.status_code == 200
    assert response.json()["price"] == 22.5
    assert response.json()["description"] == "Pão brioche"
    assert response.json()["name"] == "X-Burger"
    assert negative.status_code == 400


async def test_move_product_goes_to_end_of_target(client):
    lanches = await add_category(client, "Lanches")
    combos = await add_category(client, "Combos")
    burger = await add_product(client, lanches["id"], name="X-Burger")
    await add_product(client, combos["id"], name="Combo Família")

    response = await client.patch(f"/menu/products/{burger['id']}/category", json={"category_id": combos["id"]})
    unknown = await client.patch(f"/menu/products/{burger['id']}/category", json={"category_id": str(uuid.uuid4())})

    assert response.status_code == 200
    assert response.json()["category_id"] == combos["id"]
    assert unknown.status_code == 404
    menu = {c["name"]: [i["name"] for i in c["items"]] for c in (await client.get("/menu")).json()}
    assert menu == {"Lanches": [], "Combos": ["Combo Família", "X-Burger"]}


async def test_choice_group_selection_range(client):
    category = await add_category(client, "Pizzas")
    product = await add_product(client, category["id"], name="Calabresa")

    invalid = await client.post(f"/menu/products/{product['id']}/choices", json={"name": "Sabores", "min": 3, "max": 2})
    group = await add_choice_group(client, product["id"], name="Sabores", max=2)
    narrowed = await client.put(f"/menu/choices/{group['id']}", json={"min": 3})
    widened = await client.put(f"/menu/choices/{group['id']}", json={"min": 2, "max": 4, "required": True})

    assert invalid.status_code == 400
    assert invalid.json() == {"error": "Mínimo de seleções maior que o máximo"}
    assert narrowed.status_code == 400
    assert widened.status_code == 200
    assert (widened.json()["min"], widened.json()["max"], widened.json()["required"]) == (2, 4, True)


async def test_update_and_delete_option(client, count_rows):
    category = await add_category(client, "Pizzas")
    product = await add_product(client, category["id"], name="Calabresa")
    group = await add_choice_group(client, product["id"], name="Borda")
    option = await add_option(client, group["id"], name="Catupiry")

    updated = await client.put(f"/menu/options/{option['id']}", json={"price": 9, "max": 3})
    deleted = await client.delete(f"/menu/options/{option['id']}")
    missing = await client.delete(f"/menu/options/{option['id']}")

    assert updated.json()["price"] == 9
    assert updated.json()["max"] == 3
    assert updated.json()["name"] == "Catupiry"
    assert deleted.json() == {"success": True}
    assert missing.status_code == 404
    assert await count_rows(ChoiceOption) == 0


async def test_delete_choice_group_removes_options(client, count_rows):
    category = await add_category(client, "Pizzas")
    product = await add_product(client, category["id"], name="Calabresa")
    group = await add_choice_group(client, product["id"], name="Borda")
    await add_option(client, group["id"], name="Catupiry")

    response = await client.delete(f"/menu/choices/{group['id']}")

    assert response.json() == {"success": True}
    assert await count_rows(ChoiceGroup) == 0
    assert await count_rows(ChoiceOption) == 0


async def test_delete_category_cascades(client, count_rows):
    category = await add_category(client, "Pizzas")
    product = await add_product(client, category["id"], name="Calabresa")
    group = await add_choice_group(client, product["id"], name="Borda")
    await add_option(client, group["id"], name="Catupiry")

    response = await client.delete(f"/menu/categories/{category['id']}")

    assert response.json() == {"success": True}
    assert await count_rows(Category) == 0
    assert await count_rows(Product) == 0
    assert await count_rows(ChoiceGroup) == 0
    assert await count_rows(ChoiceOption) == 0
