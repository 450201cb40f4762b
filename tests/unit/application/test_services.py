"""Unit tests for the product, order, user and dashboard services."""
from __future__ import annotations

import asyncio
import dataclasses
from datetime import UTC, date, datetime, timedelta
from pathlib import Path
from typing import Any

import pytest

from storefront.application.cache import CacheInvalidator, CacheKey, InMemoryResponseCache, ReadThroughCache
from storefront.application.services import DashboardService, OrderService, ProductService, UserService
from storefront.domain import (
    NewOrder,
    NewProduct,
    NewUser,
    OrderItem,
    OrderStatus,
    Product,
    ProductChanges,
    ProductSearch,
    ShippingInfo,
    User,
    UserRole,
)
from storefront.kernel.errors import NotFoundError, ValidationError
from storefront.testing.fakes import RecordingAssetHost, in_memory_repositories


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

@dataclasses.dataclass
class World:
    cache: InMemoryResponseCache
    assets: RecordingAssetHost
    repos: Any
    products: ProductService
    orders: OrderService
    users: UserService
    dashboard: DashboardService

    def has(self, key: str) -> bool:
        return asyncio.run(self.cache.has(key))


def make_world(per_page: int = 8) -> World:
    cache = InMemoryResponseCache()
    reader = ReadThroughCache(cache)
    invalidator = CacheInvalidator(cache)
    repos = in_memory_repositories()
    assets = RecordingAssetHost()
    return World(
        cache=cache,
        assets=assets,
        repos=repos,
        products=ProductService(repos.products, reader, invalidator, assets, per_page=per_page),
        orders=OrderService(repos.orders, repos.products, repos.users, reader, invalidator),
        users=UserService(repos.users, repos.orders, invalidator),
        dashboard=DashboardService(repos.products, repos.orders, repos.users, reader),
    )


def add_product(world: World, name: str = "Laptop", price: float = 1000, stock: int = 10,
                category: str = "Electronics", created_at: datetime | None = None) -> Product:
    product = Product(
        name=name,
        photo="https://res.cloudinary.com/demo/image/upload/v1/old-photo.png",
        price=price,
        stock=stock,
        category=category,
    )
    if created_at is not None:
        product.created_at = created_at
    asyncio.run(world.repos.products.save(product))
    return product


def add_user(world: World, user_id: str = "u1", gender: str = "male", role: UserRole = UserRole.USER) -> User:
    user = User(id=user_id, name="Ada", email="ada@example.com", photo="p.png",
                gender=gender, dob=date(1990, 1, 1), role=role)
    asyncio.run(world.repos.users.save(user))
    return user


def new_order(product: Product, user: str = "u1", quantity: int = 2) -> NewOrder:
    return NewOrder(
        shipping_info=ShippingInfo("1 Main St", "Pune", "MH", "India", 411001),
        order_items=[OrderItem(product.name, product.photo, product.price, quantity, product.id)],
        user=user,
        sub_total=product.price * quantity,
        tax=18,
        total=product.price * quantity + 18,
    )


def staged_photo(tmp_path: Path, name: str = "photo.png") -> Path:
    path = tmp_path / name
    path.write_bytes(b"\x89PNG")
    return path


PRODUCT_KEYS = ("all-products", "latest-products", "categories")


# ---------------------------------------------------------------------------
# ProductService – reads
# ---------------------------------------------------------------------------

class TestProductReads:
    def test_read_through_queries_store_once(self):
        world = make_world()
        add_product(world)
        world.repos.products.queries.clear()

        first = asyncio.run(world.products.admin_products())
        second = asyncio.run(world.products.admin_products())

        assert first == second
        assert world.repos.products.queries == ["find_all"]
        assert world.has("all-products")

    def test_latest_limited_to_five_newest(self):
        world = make_world()
        base = datetime(2024, 1, 1, tzinfo=UTC)
        for i in range(7):
            add_product(world, name=f"P{i}", created_at=base + timedelta(days=i))

        latest = asyncio.run(world.products.latest())
        assert [p["name"] for p in latest] == ["P6", "P5", "P4", "P3", "P2"]
        assert world.has("latest-products")

    def test_categories_distinct(self):
        world = make_world()
        add_product(world, category="Books")
        add_product(world, category="books")
        add_product(world, category="Shoes")
        assert asyncio.run(world.products.categories()) == ["books", "shoes"]

    def test_get_single_product_cached(self):
        world = make_world()
        product = add_product(world)
        data = asyncio.run(world.products.get(product.id))
        assert data["name"] == "Laptop"
        assert world.has(CacheKey.product(product.id))

    def test_missing_product_not_cached(self):
        world = make_world()
        with pytest.raises(NotFoundError):
            asyncio.run(world.products.get("nonexistent"))
        assert not world.has("product-nonexistent")

    def test_search_is_not_cached(self):
        world = make_world()
        add_product(world)
        asyncio.run(world.products.search(ProductSearch()))
        asyncio.run(world.products.search(ProductSearch()))
        assert world.repos.products.queries.count("search") == 2
        assert len(world.cache) == 0

    def test_search_filters_sorts_and_paginates(self):
        world = make_world(per_page=2)
        add_product(world, name="Gaming Laptop", price=2000)
        add_product(world, name="Office Laptop", price=800)
        add_product(world, name="Laptop Bag", price=50, category="Bags")
        add_product(world, name="Phone", price=600)

        result = asyncio.run(world.products.search(ProductSearch(search="laptop", sort="asc")))
        assert [p["name"] for p in result.products] == ["Laptop Bag", "Office Laptop"]
        assert result.total_page == 2

        page2 = asyncio.run(world.products.search(ProductSearch(search="laptop", sort="asc"), page=2))
        assert [p["name"] for p in page2.products] == ["Gaming Laptop"]

        cheap = asyncio.run(world.products.search(ProductSearch(max_price=800, category="electronics")))
        assert {p["name"] for p in cheap.products} == {"Office Laptop", "Phone"}


# ---------------------------------------------------------------------------
# ProductService – mutations
# ---------------------------------------------------------------------------

class TestProductMutations:
    def _warm(self, world: World, product_id: str | None = None) -> None:
        asyncio.run(world.products.admin_products())
        asyncio.run(world.products.latest())
        asyncio.run(world.products.categories())
        if product_id:
            asyncio.run(world.products.get(product_id))

    def test_create_requires_photo(self):
        world = make_world()
        with pytest.raises(ValidationError, match="Please add photo"):
            asyncio.run(world.products.create(NewProduct("Pen", 10, 5, "Office"), None))

    def test_create_requires_fields_before_upload(self, tmp_path):
        world = make_world()
        with pytest.raises(ValidationError) as info:
            asyncio.run(world.products.create(NewProduct(name="Pen"), staged_photo(tmp_path)))
        assert set(info.value.fields) == {"price", "stock", "category"}
        assert world.assets.uploaded == []

    def test_create_uploads_and_invalidates(self, tmp_path):
        world = make_world()
        add_product(world)
        self._warm(world)

        product = asyncio.run(world.products.create(
            NewProduct("Pen", 10, 5, "Office"), staged_photo(tmp_path)
        ))

        assert product.category == "office"
        assert product.photo.startswith("https://res.cloudinary.com/")
        assert world.assets.uploaded == [b"\x89PNG"]
        for key in PRODUCT_KEYS + ("admin-stats",):
            assert not world.has(key)

    def test_update_applies_changes_and_invalidates(self):
        world = make_world()
        product = add_product(world)
        self._warm(world, product.id)

        asyncio.run(world.products.update(product.id, ProductChanges(price=899, category="COMPUTERS")))

        for key in PRODUCT_KEYS + (CacheKey.product(product.id),):
            assert not world.has(key)
        fresh = asyncio.run(world.products.get(product.id))
        assert fresh["price"] == 899
        assert fresh["category"] == "computers"
        assert fresh["name"] == "Laptop"

    def test_update_with_photo_replaces_and_destroys_old(self, tmp_path):
        world = make_world()
        product = add_product(world)
        updated = asyncio.run(world.products.update(product.id, ProductChanges(), staged_photo(tmp_path, "new.png")))
        assert world.assets.destroyed == ["old-photo"]
        assert updated.photo.endswith("/new.png")

    def test_update_missing_product(self):
        world = make_world()
        with pytest.raises(NotFoundError):
            asyncio.run(world.products.update("missing", ProductChanges(name="x")))

    def test_delete_destroys_photo_and_invalidates(self):
        world = make_world()
        product = add_product(world)
        self._warm(world, product.id)

        asyncio.run(world.products.delete(product.id))

        assert world.assets.destroyed == ["old-photo"]
        for key in PRODUCT_KEYS + (CacheKey.product(product.id),):
            assert not world.has(key)
        with pytest.raises(NotFoundError):
            asyncio.run(world.products.get(product.id))

    def test_create_read_update_scenario(self, tmp_path):
        world = make_world()
        p1 = asyncio.run(world.products.create(NewProduct("P1", 100, 3, "Toys"), staged_photo(tmp_path)))
        assert not world.has("all-products")

        asyncio.run(world.products.admin_products())
        assert world.has("all-products")

        asyncio.run(world.products.update(p1.id, ProductChanges(price=120)))
        assert not world.has("all-products")
        assert asyncio.run(world.products.admin_products())[0]["price"] == 120


# ---------------------------------------------------------------------------
# OrderService
# ---------------------------------------------------------------------------

class TestOrderService:
    def test_place_requires_fields(self):
        world = make_world()
        with pytest.raises(ValidationError, match="Please enter all fields"):
            asyncio.run(world.orders.place(NewOrder(user="u1")))

    def test_place_rejects_insufficient_stock(self):
        world = make_world()
        product = add_product(world, stock=1)
        with pytest.raises(ValidationError, match="insufficient stock"):
            asyncio.run(world.orders.place(new_order(product, quantity=2)))
        assert asyncio.run(world.repos.orders.find_all()) == []

    def test_place_rejects_unknown_product(self):
        world = make_world()
        ghost = Product(name="Ghost", photo="x", price=1, stock=5, category="x")
        with pytest.raises(ValidationError):
            asyncio.run(world.orders.place(new_order(ghost)))

    def test_place_reduces_stock_and_invalidates(self):
        world = make_world()
        add_user(world)
        product = add_product(world, stock=10)
        asyncio.run(world.products.get(product.id))
        asyncio.run(world.products.admin_products())
        asyncio.run(world.orders.all_orders())
        asyncio.run(world.orders.my_orders("u1"))

        order = asyncio.run(world.orders.place(new_order(product, quantity=3)))

        assert order.status is OrderStatus.PROCESSING
        assert asyncio.run(world.repos.products.get(product.id)).stock == 7
        for key in ("all-orders", "my-orders-u1", "all-products", CacheKey.product(product.id)):
            assert not world.has(key)

    def test_reads_are_cached(self):
        world = make_world()
        add_user(world)
        product = add_product(world)
        order = asyncio.run(world.orders.place(new_order(product)))
        world.repos.orders.queries.clear()

        asyncio.run(world.orders.get(order.id))
        asyncio.run(world.orders.get(order.id))
        asyncio.run(world.orders.all_orders())
        asyncio.run(world.orders.all_orders())

        assert world.repos.orders.queries == ["get", "find_all"]

    def test_all_orders_carry_user_name(self):
        world = make_world()
        add_user(world)
        product = add_product(world)
        asyncio.run(world.orders.place(new_order(product)))
        orders = asyncio.run(world.orders.all_orders())
        assert orders[0]["user"] == {"id": "u1", "name": "Ada"}

    def test_place_read_process_scenario(self):
        world = make_world()
        product = add_product(world)
        o1 = asyncio.run(world.orders.place(new_order(product, user="U1")))
        assert not world.has("my-orders-U1")

        asyncio.run(world.orders.my_orders("U1"))
        asyncio.run(world.orders.get(o1.id))
        assert world.has("my-orders-U1")

        processed = asyncio.run(world.orders.process(o1.id))
        assert processed.status is OrderStatus.SHIPPED
        assert not world.has("my-orders-U1")
        assert not world.has(CacheKey.order(o1.id))
        assert asyncio.run(world.orders.my_orders("U1"))[0]["status"] == "Shipped"

    def test_process_advances_to_delivered(self):
        world = make_world()
        product = add_product(world)
        order = asyncio.run(world.orders.place(new_order(product)))
        asyncio.run(world.orders.process(order.id))
        asyncio.run(world.orders.process(order.id))
        final = asyncio.run(world.orders.process(order.id))
        assert final.status is OrderStatus.DELIVERED

    def test_delete_invalidates(self):
        world = make_world()
        product = add_product(world)
        order = asyncio.run(world.orders.place(new_order(product)))
        asyncio.run(world.orders.all_orders())
        asyncio.run(world.orders.my_orders("u1"))

        asyncio.run(world.orders.delete(order.id))

        assert not world.has("all-orders")
        assert not world.has("my-orders-u1")
        with pytest.raises(NotFoundError):
            asyncio.run(world.orders.get(order.id))
        assert not world.has(CacheKey.order(order.id))

    def test_process_missing_order(self):
        world = make_world()
        with pytest.raises(NotFoundError):
            asyncio.run(world.orders.process("missing"))


# ---------------------------------------------------------------------------
# UserService
# ---------------------------------------------------------------------------

class TestUserService:
    def _request(self, user_id: str = "u1") -> NewUser:
        return NewUser(id=user_id, name="Ada", email="ada@example.com", photo="p.png",
                       gender="female", dob=date(1990, 5, 17))

    def test_register_creates_then_welcomes_back(self):
        world = make_world()
        user, created = asyncio.run(world.users.register(self._request()))
        assert created
        again, created_again = asyncio.run(world.users.register(self._request()))
        assert not created_again
        assert again.id == user.id

    def test_register_requires_fields(self):
        world = make_world()
        with pytest.raises(ValidationError):
            asyncio.run(world.users.register(NewUser(id="u1", name="Ada")))

    def test_delete_missing_user(self):
        world = make_world()
        with pytest.raises(NotFoundError):
            asyncio.run(world.users.delete("nope"))

    def test_delete_clears_cached_orders_naming_the_user(self):
        world = make_world()
        add_user(world, "u1")
        add_user(world, "u2")
        product = add_product(world)
        mine = asyncio.run(world.orders.place(new_order(product, user="u1")))
        theirs = asyncio.run(world.orders.place(new_order(product, user="u2")))
        asyncio.run(world.orders.all_orders())
        asyncio.run(world.orders.get(mine.id))
        asyncio.run(world.orders.get(theirs.id))
        asyncio.run(world.orders.my_orders("u1"))

        asyncio.run(world.users.delete("u1"))

        assert not world.has("all-orders")
        assert not world.has(f"order-{mine.id}")
        assert not world.has("my-orders-u1")
        assert world.has(f"order-{theirs.id}")
        orders = asyncio.run(world.orders.all_orders())
        assert {"id": "u1", "name": None} in [o["user"] for o in orders]

    def test_register_invalidates_dashboard(self):
        world = make_world()
        asyncio.run(world.dashboard.stats())
        asyncio.run(world.users.register(self._request()))
        assert not world.has("admin-stats")


# ---------------------------------------------------------------------------
# DashboardService
# ---------------------------------------------------------------------------

class TestDashboardService:
    def test_stats(self):
        world = make_world()
        add_user(world, "u1", gender="male")
        add_user(world, "u2", gender="female")
        laptop = add_product(world, category="electronics")
        add_product(world, name="Novel", category="books")
        asyncio.run(world.orders.place(new_order(laptop, quantity=1)))

        stats = asyncio.run(world.dashboard.stats())

        assert stats["count"] == {"product": 2, "user": 2, "order": 1}
        assert stats["revenue"] == 1018
        assert stats["category_count"] == {"electronics": 50, "books": 50}
        assert stats["user_ratio"] == {"male": 1, "female": 1}
        assert stats["latest_transactions"][0]["quantity"] == 1
        assert world.has("admin-stats")

    def test_pie_charts_invalidated_by_order_processing(self):
        world = make_world()
        add_user(world, "admin", role=UserRole.ADMIN)
        product = add_product(world, stock=1)
        add_product(world, name="Empty", stock=0)
        order = asyncio.run(world.orders.place(new_order(product, quantity=1)))

        charts = asyncio.run(world.dashboard.pie_charts())
        assert charts["order_fulfillment"] == {"processing": 1, "shipped": 0, "delivered": 0}
        assert charts["stock_availability"] == {"in_stock": 0, "out_of_stock": 2}
        assert charts["admin_customer"] == {"admin": 1, "customer": 0}

        asyncio.run(world.orders.process(order.id))
        assert not world.has("admin-pie-charts")
        charts = asyncio.run(world.dashboard.pie_charts())
        assert charts["order_fulfillment"]["shipped"] == 1
