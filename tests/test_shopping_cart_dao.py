from decimal import Decimal

from dao.errors import StoreError
from dao.models import Product, ShoppingCart, ShoppingCartItem
from dao.product_dao import ProductDao
from dao.shopping_cart_dao import ShoppingCartDao
from store_case import StoreTestCase


class ShoppingCartDaoTestCase(StoreTestCase):
    def setUp(self):
        super().setUp()
        self.dao = ShoppingCartDao()
        self.products = ProductDao()

    async def test_get_by_user_id(self):
        cart = await self.dao.get_by_user_id(3)
        self.assertEqual(set(cart.items), {7, 8})
        self.assertEqual(cart.get(7).quantity, 2)
        self.assertEqual(cart.get(7).product.name, "Mug")
        self.assertEqual(cart.get(8).quantity, 1)

        empty = await self.dao.get_by_user_id(1)
        self.assertEqual(empty.items, {})

    async def test_get_by_order_id(self):
        cart = await self.dao.get_by_order_id(1)
        self.assertEqual({pid: i.quantity for pid, i in cart.items.items()}, {2: 1, 3: 2})
        self.assertEqual((await self.dao.get_by_order_id(999)).items, {})

    async def test_add_item_twice_bumps_quantity(self):
        item = ShoppingCartItem(product=await self.products.get_by_id(4))
        cart = await self.dao.add_item(1, item)
        self.assertEqual(cart.get(4).quantity, 1)

        cart = await self.dao.add_item(1, item)
        self.assertEqual(len(cart.items), 1)
        self.assertEqual(cart.get(4).quantity, 2)
        self.assertEqual(await self.count_rows("shopping_cart"), 3)

    async def test_add_item_to_existing_cart(self):
        cart = await self.dao.add_item(3, ShoppingCartItem(product=Product(product_id=7)))
        self.assertEqual(cart.get(7).quantity, 3)
        self.assertEqual(cart.get(8).quantity, 1)

    async def test_update_item_sets_quantity(self):
        item = ShoppingCartItem(product=Product(product_id=8), quantity=5)
        await self.dao.update_item(3, item)
        cart = await self.dao.get_by_user_id(3)
        self.assertEqual(cart.get(8).quantity, 5)

    async def test_update_item_missing_row_raises(self):
        item = ShoppingCartItem(product=Product(product_id=1), quantity=3)
        with self.assertRaises(StoreError):
            await self.dao.update_item(3, item)
        self.assertFalse((await self.dao.get_by_user_id(3)).contains(1))

    async def test_delete_shopping_cart(self):
        await self.dao.delete_shopping_cart(3)
        self.assertEqual((await self.dao.get_by_user_id(3)).items, {})

        # nothing to delete is fine
        await self.dao.delete_shopping_cart(1)
        self.assertEqual((await self.dao.get_by_user_id(1)).items, {})

    async def test_get_shopping_cart_total(self):
        cart = await self.dao.get_by_user_id(3)
        self.assertEqual(self.dao.get_shopping_cart_total(cart), Decimal("24.98"))
        self.assertEqual(self.dao.get_shopping_cart_total(ShoppingCart()), Decimal("0"))
