# provide dataclass models

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, Optional


@dataclass(frozen=True)
class Product:
    product_id: int = 0
    name: str = ""
    price: Decimal = Decimal("0")
    category_id: int = 0
    description: str = ""
    subcategory: str = ""
    stock: int = 0
    featured: bool = False
    image_url: str = ""


@dataclass(frozen=True)
class Profile:
    user_id: int = 0
    first_name: str = ""
    last_name: str = ""
    phone: str = ""
    email: str = ""
    address: str = ""
    city: str = ""
    state: str = ""
    zip_code: str = ""


@dataclass
class User:
    user_id: int = 0
    username: str = ""
    password: str = ""  # plaintext going in, bcrypt hash at rest
    role: str = ""  # e.g. "ROLE_USER" or "ROLE_ADMIN"


@dataclass
class ShoppingCartItem:
    product: Product
    quantity: int = 1

    @property
    def product_id(self) -> int:
        return self.product.product_id

    @property
    def line_total(self) -> Decimal:
        return self.product.price * self.quantity


@dataclass
class ShoppingCart:
    """A user's cart, one item per product id."""

    items: Dict[int, ShoppingCartItem] = field(default_factory=dict)

    def add(self, item: ShoppingCartItem) -> None:
        self.items[item.product_id] = item

    def contains(self, product_id: int) -> bool:
        return product_id in self.items

    def get(self, product_id: int) -> Optional[ShoppingCartItem]:
        return self.items.get(product_id)

    @property
    def total(self) -> Decimal:
        return sum((item.line_total for item in self.items.values()), Decimal("0"))
