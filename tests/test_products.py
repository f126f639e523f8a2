import pytest

from store_admin.db.crud import order as order_crud
from store_admin.db.models import Product, ProductImage, Size


@pytest.fixture
def product_body(category, size, color):
    return {
        "name": "Hoodie",
        "price": 49.5,
        "categoryId": category.id,
        "sizeId": size.id,
        "colorId": color.id,
        "images": [{"url": "https://img.example/hoodie-front.png"}, {"url": "https://img.example/hoodie-back.png"}],
        "isFeatured": True,
    }


def test_create_product(client, store, owner_headers, product_body):
    response = client.post(f"/api/{store.id}/products", json=product_body, headers=owner_headers)

    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Hoodie"
    assert data["price"] == 49.5
    assert data["isFeatured"] is True
    assert data["isArchived"] is False
    assert sorted(image["url"] for image in data["images"]) == sorted(
        image["url"] for image in product_body["images"]
    )


@pytest.mark.parametrize(
    "field, message",
    [
        ("name", "Name is required"),
        ("price", "Price is required"),
        ("categoryId", "Category ID is required"),
        ("sizeId", "Size ID is required"),
        ("colorId", "Color ID is required"),
        ("images", "Images are required"),
    ],
)
def test_required_fields(client, store, owner_headers, product_body, count, field, message):
    body = dict(product_body)
    body.pop(field)

    response = client.post(f"/api/{store.id}/products", json=body, headers=owner_headers)

    assert response.status_code == 400
    assert response.text == message
    assert count(Product) == 0


def test_empty_image_list_is_missing(client, store, owner_headers, product_body):
    product_body["images"] = []
    response = client.post(f"/api/{store.id}/products", json=product_body, headers=owner_headers)
    assert response.status_code == 400
    assert response.text == "Images are required"


def test_negative_price_is_rejected(client, store, owner_headers, product_body):
    product_body["price"] = -1
    response = client.post(f"/api/{store.id}/products", json=product_body, headers=owner_headers)
    assert response.status_code == 400


def test_negative_price_without_identity_is_unauthenticated(client, store, product_body, count):
    product_body["price"] = -1

    response = client.post(f"/api/{store.id}/products", json=product_body)

    assert response.status_code == 401
    assert response.text == "Unauthenticated"
    assert count(Product) == 0


def test_size_of_another_store_is_rejected(client, store, other_store, owner_headers, product_body, db_session):
    foreign = Size(store_id=other_store.id, name="XL", value="XL")
    db_session.add(foreign)
    db_session.commit()
    product_body["sizeId"] = foreign.id

    response = client.post(f"/api/{store.id}/products", json=product_body, headers=owner_headers)

    assert response.status_code == 400
    assert response.text == "Size not found in this store"


def test_public_list_hides_archived_and_filters(client, store, product, owner_headers, product_body):
    product_body["isArchived"] = True
    client.post(f"/api/{store.id}/products", json=product_body, headers=owner_headers)

    listed = client.get(f"/api/{store.id}/products")
    assert [item["id"] for item in listed.json()] == [product.id]

    featured = client.get(f"/api/{store.id}/products", params={"isFeatured": "true"})
    assert featured.json() == []

    by_category = client.get(f"/api/{store.id}/products", params={"categoryId": product.category_id})
    assert [item["id"] for item in by_category.json()] == [product.id]


def test_fetch_includes_relations(client, store, product, category, size, color):
    data = client.get(f"/api/{store.id}/products/{product.id}").json()

    assert data["category"]["id"] == category.id
    assert data["size"]["value"] == size.value
    assert data["color"]["value"] == color.value
    assert data["price"] == 19.99
    assert len(data["images"]) == 1


def test_update_replaces_images(client, store, product, owner_headers, product_body, count):
    product_body["images"] = [{"url": "https://img.example/new.png"}]

    response = client.patch(f"/api/{store.id}/products/{product.id}", json=product_body, headers=owner_headers)

    assert response.status_code == 200
    assert [image["url"] for image in response.json()["images"]] == ["https://img.example/new.png"]
    assert count(ProductImage) == 1


def test_delete_product_removes_images(client, store, product, owner_headers, fetch, count):
    response = client.delete(f"/api/{store.id}/products/{product.id}", headers=owner_headers)

    assert response.status_code == 200
    assert fetch(Product, product.id) is None
    assert count(ProductImage) == 0


def test_delete_ordered_product_is_blocked(client, store, product, owner_headers, db_session, fetch):
    order_crud.create_order(db_session, store.id, [product.id], phone="555-0100", address="1 Main St")

    response = client.delete(f"/api/{store.id}/products/{product.id}", headers=owner_headers)

    assert response.status_code == 409
    assert response.text == "Make sure you removed all orders using this product first."
    assert fetch(Product, product.id) is not None
