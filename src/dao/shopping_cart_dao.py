from __future__ import annotations

from decimal import Decimal
from typing import Iterable

from dao import models
from dao.base import DaoBase
from dao.errors import StoreError
from dao.product_dao import map_product_row
from utils.logger import get_logger

_logger = get_logger(__name__)


def _rows_to_cart(rows: Iterable) -> models.ShoppingCart:
    cart = models.ShoppingCart()
    for row in rows:
        cart.add(
            models.ShoppingCartItem(
                product=map_product_row(row), quantity=int(row["quantity"])
            )
        )
    return cart


class ShoppingCartDao(DaoBase):
    async def get_by_user_id(self, user_id: int) -> models.ShoppingCart:
        """The user's live cart; empty if they have nothing in it."""
        async with self._connect() as conn:
            cur = await conn.execute(
                """
                SELECT p.product_id, p.name, p.price, p.category_id, p.description,
                       p.subcategory, p.image_url, p.stock, p.featured, sc.quantity
                FROM shopping_cart sc
                JOIN products p ON sc.product_id = p.product_id
                WHERE sc.user_id = ?;
                """,
                (user_id,),
            )
            rows = await cur.fetchall()
            await cur.close()
        return _rows_to_cart(rows)

    async def get_by_order_id(self, order_id: int) -> models.ShoppingCart:
        """Contents of a placed order, in cart shape."""
        async with self._connect() as conn:
            cur = await conn.execute(
                """
                SELECT p.product_id, p.name, p.price, p.category_id, p.description,
                       p.subcategory, p.image_url, p.stock, p.featured, oli.quantity
                FROM order_line_items oli
                JOIN orders o ON oli.order_id = o.order_id
                JOIN products p ON oli.product_id = p.product_id
                WHERE o.order_id = ?;
                """,
                (order_id,),
            )
            rows = await cur.fetchall()
            await cur.close()
        return _rows_to_cart(rows)

    async def add_item(
        self, user_id: int, item: models.ShoppingCartItem
    ) -> models.ShoppingCart:
        """
        Put one of the item's product in the cart: a new row starts at quantity 1,
        an existing one is bumped by 1. Returns the reloaded cart.
        """
        async with self._connect() as conn:
            await conn.execute(
                """
                INSERT INTO shopping_cart(user_id, product_id, quantity)
                VALUES (?, ?, 1)
                ON CONFLICT(user_id, product_id) DO UPDATE
                SET quantity = quantity + 1;
                """,
                (user_id, item.product_id),
            )
            await conn.commit()
        return await self.get_by_user_id(user_id)

    async def update_item(self, user_id: int, item: models.ShoppingCartItem) -> None:
        """Set the quantity of a product already in the cart.

        Raises StoreError if the product is not in the user's cart.
        """
        async with self._connect() as conn:
            cur = await conn.execute(
                """
                UPDATE shopping_cart
                SET quantity = ?
                WHERE user_id = ?
                  AND product_id = ?;
                """,
                (item.quantity, user_id, item.product_id),
            )
            rows_affected = cur.rowcount
            await cur.close()
            if rows_affected == 0:
                _logger.error(
                    f"Cart update for user {user_id}, product {item.product_id} hit no rows"
                )
                raise StoreError("Update failed, no rows affected!")
            await conn.commit()

    async def delete_shopping_cart(self, user_id: int) -> None:
        async with self._connect() as conn:
            await conn.execute("DELETE FROM shopping_cart WHERE user_id = ?;", (user_id,))
            await conn.commit()

    def get_shopping_cart_total(self, cart: models.ShoppingCart) -> Decimal:
        return cart.total
