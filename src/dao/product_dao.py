from __future__ import annotations

from decimal import Decimal
from sqlite3 import Row
from typing import List, Optional

from dao import models
from dao.base import DaoBase
from utils.logger import get_logger

_logger = get_logger(__name__)

_PRODUCT_COLUMNS = """
    product_id, name, price, category_id, description,
    subcategory, image_url, stock, featured
"""


def map_product_row(row: Row) -> models.Product:
    """Build a Product from a row holding the products columns."""
    return models.Product(
        product_id=int(row["product_id"]),
        name=row["name"],
        price=Decimal(str(row["price"])),
        category_id=int(row["category_id"]),
        description=row["description"],
        subcategory=row["subcategory"],
        stock=int(row["stock"]),
        featured=bool(row["featured"]),
        image_url=row["image_url"],
    )


def _price_param(price: Decimal) -> str:
    # bound as text; the NUMERIC column affinity converts it in the store
    return str(price)


def _product_params(product: models.Product) -> tuple:
    return (
        product.name,
        _price_param(product.price),
        product.category_id,
        product.description,
        product.subcategory,
        product.image_url,
        product.stock,
        product.featured,
    )


class ProductDao(DaoBase):
    async def search(
        self,
        category_id: Optional[int] = None,
        min_price: Optional[Decimal] = None,
        max_price: Optional[Decimal] = None,
        subcategory: Optional[str] = None,
    ) -> List[models.Product]:
        """
        Products matching every filter given. A filter left as None matches
        everything; returns an empty list when nothing matches.
        """
        category_id = -1 if category_id is None else category_id
        min_price = Decimal("-1") if min_price is None else min_price
        max_price = Decimal("-1") if max_price is None else max_price
        subcategory = "" if subcategory is None else subcategory

        async with self._connect() as conn:
            cur = await conn.execute(
                f"""
                SELECT {_PRODUCT_COLUMNS}
                FROM products
                WHERE (category_id = ? OR ? = -1)
                  AND (price >= ? OR CAST(? AS NUMERIC) = -1)
                  AND (price <= ? OR CAST(? AS NUMERIC) = -1)
                  AND (subcategory = ? OR ? = '');
                """,
                (
                    category_id,
                    category_id,
                    _price_param(min_price),
                    _price_param(min_price),
                    _price_param(max_price),
                    _price_param(max_price),
                    subcategory,
                    subcategory,
                ),
            )
            rows = await cur.fetchall()
            await cur.close()
        return [map_product_row(row) for row in rows]

    async def list_by_category_id(self, category_id: int) -> List[models.Product]:
        async with self._connect() as conn:
            cur = await conn.execute(
                f"SELECT {_PRODUCT_COLUMNS} FROM products WHERE category_id = ?;",
                (category_id,),
            )
            rows = await cur.fetchall()
            await cur.close()
        return [map_product_row(row) for row in rows]

    async def get_by_id(self, product_id: int) -> Optional[models.Product]:
        """Fetch a product by id, or None."""
        async with self._connect() as conn:
            cur = await conn.execute(
                f"SELECT {_PRODUCT_COLUMNS} FROM products WHERE product_id = ?;",
                (product_id,),
            )
            row = await cur.fetchone()
            await cur.close()
        if not row:
            return None
        return map_product_row(row)

    async def create(self, product: models.Product) -> Optional[models.Product]:
        """
        Insert a product and return it as stored, re-read by its new id.
        Returns None if nothing was inserted or the new id is unavailable.
        """
        async with self._connect() as conn:
            cur = await conn.execute(
                """
                INSERT INTO products(name, price, category_id, description,
                                     subcategory, image_url, stock, featured)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?);
                """,
                _product_params(product),
            )
            rows_affected = cur.rowcount
            new_id = cur.lastrowid
            await cur.close()
            await conn.commit()

        if rows_affected <= 0 or not new_id:
            return None
        _logger.debug(f"Created product {new_id}")
        return await self.get_by_id(new_id)

    async def update(self, product_id: int, product: models.Product) -> None:
        """Overwrite every column of the product; does nothing for an unknown id."""
        async with self._connect() as conn:
            await conn.execute(
                """
                UPDATE products
                SET name = ?,
                    price = ?,
                    category_id = ?,
                    description = ?,
                    subcategory = ?,
                    image_url = ?,
                    stock = ?,
                    featured = ?
                WHERE product_id = ?;
                """,
                (*_product_params(product), product_id),
            )
            await conn.commit()

    async def delete(self, product_id: int) -> None:
        async with self._connect() as conn:
            await conn.execute(
                "DELETE FROM products WHERE product_id = ?;", (product_id,)
            )
            await conn.commit()
