from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional
from store_admin.core.auth import get_current_user_id
from store_admin.core.errors import endpoint
from store_admin.core.guard import Action, guard_mutation, require_record_id
from store_admin.core.integrity import ensure_deletable, integrity_guard
from store_admin.core.resources import PRODUCT
from store_admin.database import get_db
from store_admin.db.crud import product as product_crud
from store_admin.db.schemas.product import ProductDetail, ProductPayload, ProductRead

router = APIRouter(tags=["products"])

@router.get("/{store_id}/products", response_model=List[ProductDetail])
def list_products(
    store_id: str,
    category_id: Optional[str] = Query(None, alias="categoryId"),
    size_id: Optional[str] = Query(None, alias="sizeId"),
    color_id: Optional[str] = Query(None, alias="colorId"),
    is_featured: Optional[bool] = Query(None, alias="isFeatured"),
    db: Session = Depends(get_db),
):
    """Public storefront listing; archived products are never returned"""
    with endpoint("PRODUCTS_GET", db):
        return product_crud.get_products_by_store(
            db,
            store_id,
            category_id=category_id,
            size_id=size_id,
            color_id=color_id,
            is_featured=is_featured,
        )

@router.get("/{store_id}/products/{product_id}", response_model=Optional[ProductDetail])
def get_product(store_id: str, product_id: str, db: Session = Depends(get_db)):
    with endpoint("PRODUCT_GET", db):
        product_id = require_record_id(PRODUCT, product_id)
        return product_crud.get_product(db, store_id, product_id)

@router.post("/{store_id}/products", response_model=ProductRead)
def create_product(
    store_id: str,
    payload: Optional[ProductPayload] = None,
    user_id: Optional[str] = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    with endpoint("PRODUCTS_POST", db):
        guard_mutation(db, PRODUCT, user_id, store_id, Action.CREATE, payload=payload)
        return product_crud.create_product(db, store_id, payload)

@router.patch("/{store_id}/products", response_model=ProductRead)
@router.patch("/{store_id}/products/{product_id}", response_model=ProductRead)
def update_product(
    store_id: str,
    product_id: Optional[str] = None,
    payload: Optional[ProductPayload] = None,
    user_id: Optional[str] = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Update a product; the submitted images replace the stored ones"""
    with endpoint("PRODUCT_PATCH", db):
        db_product = guard_mutation(
            db, PRODUCT, user_id, store_id, Action.UPDATE,
            payload=payload, record_id=product_id,
        )
        return product_crud.update_product(db, db_product, payload)

@router.delete("/{store_id}/products", response_model=ProductRead)
@router.delete("/{store_id}/products/{product_id}", response_model=ProductRead)
def delete_product(
    store_id: str,
    product_id: Optional[str] = None,
    user_id: Optional[str] = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    with endpoint("PRODUCT_DELETE", db):
        db_product = guard_mutation(
            db, PRODUCT, user_id, store_id, Action.DELETE, record_id=product_id,
        )
        deleted = ProductRead.model_validate(db_product)
        ensure_deletable(db, PRODUCT, db_product.id)
        with integrity_guard(db, PRODUCT):
            product_crud.delete_product(db, db_product)
        return deleted
