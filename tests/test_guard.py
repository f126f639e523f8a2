import pytest

from store_admin.core.errors import Forbidden, NotFound, Unauthenticated, ValidationError
from store_admin.core.guard import (
    Action,
    AuthResult,
    authorize,
    guard_mutation,
    is_missing,
    validate_required,
)
from store_admin.core.resources import BILLBOARD, CATEGORY, PRODUCT
from store_admin.db.models import Billboard
from store_admin.db.schemas.billboard import BillboardPayload
from store_admin.db.schemas.category import CategoryPayload
from store_admin.db.schemas.product import ProductPayload

from conftest import OTHER_ID, OWNER_ID


def test_authorize_without_identity(db_session, store):
    assert authorize(db_session, None, store.id) is AuthResult.UNAUTHENTICATED
    assert authorize(db_session, "", store.id) is AuthResult.UNAUTHENTICATED


def test_authorize_owner(db_session, store):
    assert authorize(db_session, OWNER_ID, store.id) is AuthResult.AUTHORIZED


def test_authorize_other_user(db_session, store):
    assert authorize(db_session, OTHER_ID, store.id) is AuthResult.FORBIDDEN


def test_authorize_unknown_store(db_session):
    assert authorize(db_session, OWNER_ID, "no-such-store") is AuthResult.FORBIDDEN


@pytest.mark.parametrize(
    "value, missing",
    [
        (None, True),
        ("", True),
        ("   ", True),
        ([], True),
        ("Shoes", False),
        (0, False),
        (["x"], False),
    ],
)
def test_is_missing(value, missing):
    assert is_missing(value) is missing


def test_validate_required_reports_first_missing_field_in_order():
    with pytest.raises(ValidationError) as exc:
        validate_required(BILLBOARD, BillboardPayload())
    assert exc.value.message == "Label is required"

    with pytest.raises(ValidationError) as exc:
        validate_required(BILLBOARD, BillboardPayload(label="Sale"))
    assert exc.value.message == "Image URL is required"


def test_validate_required_accepts_none_payload_as_empty():
    with pytest.raises(ValidationError) as exc:
        validate_required(CATEGORY, None)
    assert exc.value.message == "Name is required"


def test_missing_identity_wins_over_missing_fields(db_session, store):
    with pytest.raises(Unauthenticated):
        guard_mutation(db_session, BILLBOARD, None, store.id, Action.CREATE, payload=BillboardPayload())


def test_missing_field_wins_over_foreign_store(db_session, store):
    with pytest.raises(ValidationError):
        guard_mutation(db_session, BILLBOARD, OTHER_ID, store.id, Action.CREATE, payload=BillboardPayload())


def test_foreign_store_wins_over_missing_record_id(db_session, store):
    payload = BillboardPayload(label="Sale", image_url="https://img.example/sale.png")
    with pytest.raises(Forbidden):
        guard_mutation(db_session, BILLBOARD, OTHER_ID, store.id, Action.UPDATE, payload=payload)


def test_missing_record_id_for_update(db_session, store):
    payload = BillboardPayload(label="Sale", image_url="https://img.example/sale.png")
    with pytest.raises(ValidationError) as exc:
        guard_mutation(db_session, BILLBOARD, OWNER_ID, store.id, Action.UPDATE, payload=payload)
    assert exc.value.message == "Billboard ID is required"


def test_record_of_another_store_is_not_found(db_session, store, other_store):
    foreign = Billboard(store_id=other_store.id, label="X", image_url="https://img.example/x.png")
    db_session.add(foreign)
    db_session.commit()

    with pytest.raises(NotFound) as exc:
        guard_mutation(db_session, BILLBOARD, OWNER_ID, store.id, Action.DELETE, record_id=foreign.id)
    assert exc.value.message == "Billboard not found"


def test_reference_must_belong_to_same_store(db_session, store, other_store):
    foreign = Billboard(store_id=other_store.id, label="X", image_url="https://img.example/x.png")
    db_session.add(foreign)
    db_session.commit()

    payload = CategoryPayload(name="Shoes", billboard_id=foreign.id)
    with pytest.raises(ValidationError) as exc:
        guard_mutation(db_session, CATEGORY, OWNER_ID, store.id, Action.CREATE, payload=payload)
    assert exc.value.message == "Billboard not found in this store"


def test_create_returns_no_record(db_session, store, billboard):
    payload = CategoryPayload(name="Shoes", billboard_id=billboard.id)
    assert guard_mutation(db_session, CATEGORY, OWNER_ID, store.id, Action.CREATE, payload=payload) is None


def test_product_fields_checked_in_declared_order():
    assert [field.attr for field in PRODUCT.required] == [
        "name", "price", "category_id", "size_id", "color_id", "images",
    ]


def test_product_fields_report_first_missing_in_order():
    with pytest.raises(ValidationError) as exc:
        validate_required(PRODUCT, ProductPayload(name="Tee"))
    assert exc.value.message == "Price is required"
