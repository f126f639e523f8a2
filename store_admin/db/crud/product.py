from sqlalchemy.orm import Session, selectinload
from typing import List, Optional
from store_admin.db.models.product import Product, ProductImage
from store_admin.db.schemas.product import ProductPayload

def _with_relations(query):
    return query.options(
        selectinload(Product.images),
        selectinload(Product.category),
        selectinload(Product.size),
        selectinload(Product.color),
    )

def get_product(db: Session, store_id: str, product_id: str) -> Optional[Product]:
    return (
        _with_relations(db.query(Product))
        .filter(Product.id == product_id, Product.store_id == store_id)
        .first()
    )

def get_products_by_store(
    db: Session,
    store_id: str,
    category_id: Optional[str] = None,
    size_id: Optional[str] = None,
    color_id: Optional[str] = None,
    is_featured: Optional[bool] = None,
    include_archived: bool = False,
) -> List[Product]:
    query = _with_relations(db.query(Product)).filter(Product.store_id == store_id)
    if category_id:
        query = query.filter(Product.category_id == category_id)
    if size_id:
        query = query.filter(Product.size_id == size_id)
    if color_id:
        query = query.filter(Product.color_id == color_id)
    if is_featured is not None:
        query = query.filter(Product.is_featured == is_featured)
    if not include_archived:
        query = query.filter(Product.is_archived.is_(False))
    return query.order_by(Product.created_at.desc()).all()

def _apply(db_product: Product, product: ProductPayload) -> None:
    db_product.name = product.name
    db_product.price = product.price
    db_product.category_id = product.category_id
    db_product.size_id = product.size_id
    db_product.color_id = product.color_id
    db_product.is_featured = product.is_featured
    db_product.is_archived = product.is_archived

def create_product(db: Session, store_id: str, product: ProductPayload) -> Product:
    db_product = Product(store_id=store_id)
    _apply(db_product, product)
    db_product.images = [ProductImage(url=image.url) for image in product.images]
    db.add(db_product)
    db.commit()
    db.refresh(db_product)
    return db_product

def update_product(db: Session, db_product: Product, product: ProductPayload) -> Product:
    _apply(db_product, product)
    # The submitted image set replaces the stored one
    db_product.images = [ProductImage(url=image.url) for image in product.images]
    db.commit()
    db.refresh(db_product)
    return db_product

def delete_product(db: Session, db_product: Product) -> None:
    db.delete(db_product)
    db.commit()
