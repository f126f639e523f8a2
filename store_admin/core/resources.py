"""
Per-resource policy data.

Each ``ResourceKind`` describes one store-scoped resource family: the fields a
create/update must carry, the same-store references those fields point at, and
the dependent rows that block a delete.  ``guard`` and ``integrity`` read this
table so that check ordering lives in one place and never drifts per endpoint.
"""

from dataclasses import dataclass
from typing import Tuple, Type

from store_admin.database import Base
from store_admin.db.models import (
    Billboard,
    Category,
    Color,
    Order,
    OrderItem,
    Product,
    Size,
    Store,
)


@dataclass(frozen=True)
class RequiredField:
    attr: str
    message: str


@dataclass(frozen=True)
class Reference:
    """A payload field that must name a row of ``model`` in the same store."""

    attr: str
    model: Type[Base]
    label: str


@dataclass(frozen=True)
class Dependent:
    """Rows of ``model`` whose ``column`` points at the resource."""

    model: Type[Base]
    column: str


@dataclass(frozen=True)
class ResourceKind:
    name: str
    label: str
    model: Type[Base]
    required: Tuple[RequiredField, ...]
    references: Tuple[Reference, ...] = ()
    dependents: Tuple[Dependent, ...] = ()
    blocked_message: str = "Make sure you removed all dependent records first."

    @property
    def id_message(self) -> str:
        return f"{self.label} ID is required"

    @property
    def not_found_message(self) -> str:
        return f"{self.label} not found"


STORE = ResourceKind(
    name="store",
    label="Store",
    model=Store,
    required=(RequiredField("name", "Name is required"),),
    dependents=(
        Dependent(Billboard, "store_id"),
        Dependent(Category, "store_id"),
        Dependent(Size, "store_id"),
        Dependent(Color, "store_id"),
        Dependent(Product, "store_id"),
        Dependent(Order, "store_id"),
    ),
    blocked_message="Make sure you removed all products and categories first.",
)

BILLBOARD = ResourceKind(
    name="billboard",
    label="Billboard",
    model=Billboard,
    required=(
        RequiredField("label", "Label is required"),
        RequiredField("image_url", "Image URL is required"),
    ),
    dependents=(Dependent(Category, "billboard_id"),),
    blocked_message="Make sure you removed all categories using this billboard first.",
)

CATEGORY = ResourceKind(
    name="category",
    label="Category",
    model=Category,
    required=(
        RequiredField("name", "Name is required"),
        RequiredField("billboard_id", "Billboard ID is required"),
    ),
    references=(Reference("billboard_id", Billboard, "Billboard"),),
    dependents=(Dependent(Product, "category_id"),),
    blocked_message="Make sure you removed all products using this category first.",
)

SIZE = ResourceKind(
    name="size",
    label="Size",
    model=Size,
    required=(
        RequiredField("name", "Name is required"),
        RequiredField("value", "Value is required"),
    ),
    dependents=(Dependent(Product, "size_id"),),
    blocked_message="Make sure you removed all products using this size first.",
)

COLOR = ResourceKind(
    name="color",
    label="Color",
    model=Color,
    required=(
        RequiredField("name", "Name is required"),
        RequiredField("value", "Value is required"),
    ),
    dependents=(Dependent(Product, "color_id"),),
    blocked_message="Make sure you removed all products using this color first.",
)

PRODUCT = ResourceKind(
    name="product",
    label="Product",
    model=Product,
    required=(
        RequiredField("name", "Name is required"),
        RequiredField("price", "Price is required"),
        RequiredField("category_id", "Category ID is required"),
        RequiredField("size_id", "Size ID is required"),
        RequiredField("color_id", "Color ID is required"),
        RequiredField("images", "Images are required"),
    ),
    references=(
        Reference("category_id", Category, "Category"),
        Reference("size_id", Size, "Size"),
        Reference("color_id", Color, "Color"),
    ),
    dependents=(Dependent(OrderItem, "product_id"),),
    blocked_message="Make sure you removed all orders using this product first.",
)
