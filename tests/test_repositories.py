"""
Tests for the user and product repositories.

Covers:
- seed data
- domain queries (email, role, category, price range, search, low stock)
- email uniqueness
- availability derived from stock
- records handed out are immutable snapshots
- serialised check-then-write under concurrent callers
"""

import dataclasses
import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from storefront.domain.exceptions import DuplicateEmailError, InsufficientStockError
from storefront.domain.models import CreateProductDto, CreateUserDto, UpdateProductDto, UpdateUserDto, UserRole
from storefront.infrastructure.repositories.product_repository import ProductRepository
from storefront.infrastructure.repositories.user_repository import UserRepository


class TestUserRepository:
    def test_seed_data(self, user_repository):
        users = user_repository.find_all()

        assert [user.email for user in users] == [
            "admin@example.com",
            "john@example.com",
            "jane@example.com",
        ]
        assert users[0].role is UserRole.ADMIN
        assert all(user.is_active for user in users)

    def test_unseeded_repository_is_empty(self):
        assert UserRepository(seed=False).count() == 0

    def test_find_by_email(self, user_repository):
        assert user_repository.find_by_email("jane@example.com").id == "3"
        assert user_repository.find_by_email("nobody@example.com") is None

    def test_find_by_role(self, user_repository):
        assert [user.id for user in user_repository.find_by_role(UserRole.MODERATOR)] == ["3"]

    def test_search_matches_name_or_email_case_insensitively(self, user_repository):
        assert [user.id for user in user_repository.search_users("JOHN")] == ["2"]
        assert [user.id for user in user_repository.search_users("example.com")] == ["1", "2", "3"]

    def test_create_user_defaults(self, user_repository):
        user = user_repository.create_user(CreateUserDto(email="new@example.com", name="New Person"))

        assert user.role is UserRole.USER
        assert user.is_active is True
        assert user_repository.find_by_id(user.id) == user

    def test_create_user_rejects_existing_email(self, user_repository):
        with pytest.raises(DuplicateEmailError, match="User with this email already exists"):
            user_repository.create_user(CreateUserDto(email="admin@example.com", name="Imposter"))

        assert user_repository.count() == 3

    def test_update_user_rejects_email_of_another_user(self, user_repository):
        with pytest.raises(DuplicateEmailError):
            user_repository.update_user("2", UpdateUserDto(email="jane@example.com"))

    def test_update_user_may_keep_its_own_email(self, user_repository):
        user = user_repository.update_user("2", UpdateUserDto(email="john@example.com", name="Johnny"))

        assert user.name == "Johnny"
        assert user.email == "john@example.com"

    def test_update_user_only_touches_supplied_fields(self, user_repository):
        user = user_repository.update_user("3", UpdateUserDto(role=UserRole.USER))

        assert user.role is UserRole.USER
        assert user.name == "Jane Smith"
        assert user.is_active is True

    def test_activation_toggles(self, user_repository):
        assert user_repository.deactivate_user("2").is_active is False
        assert [user.id for user in user_repository.find_active_users()] == ["1", "3"]
        assert user_repository.activate_user("2").is_active is True
        assert user_repository.deactivate_user("404") is None


class TestProductRepository:
    def test_seed_data(self, product_repository):
        laptop = product_repository.find_by_id("1")

        assert laptop.name == "Laptop Pro"
        assert laptop.stock == 50
        assert laptop.is_available is True
        assert product_repository.count() == 3

    def test_unseeded_repository_is_empty(self):
        assert ProductRepository(seed=False).count() == 0

    def test_find_by_category(self, product_repository):
        assert [p.id for p in product_repository.find_by_category("cat2")] == ["2", "3"]

    def test_price_range_is_inclusive(self, product_repository):
        assert [p.id for p in product_repository.find_by_price_range(29.99, 149.99)] == ["2", "3"]

    def test_search_matches_description(self, product_repository):
        assert [p.id for p in product_repository.search_products("gaming")] == ["3"]

    def test_low_stock(self, product_repository):
        assert [p.id for p in product_repository.get_low_stock_products(25)] == ["3"]
        assert product_repository.get_low_stock_products() == []

    def test_create_product_derives_availability(self, product_repository):
        empty = product_repository.create_product(
            CreateProductDto(name="Cable", description="USB-C", price=9.5, category_id="cat3", stock=0)
        )

        assert empty.is_available is False
        assert empty not in product_repository.find_available_products()

    def test_update_product_stock_overrides_availability(self, product_repository):
        product = product_repository.update_product("2", UpdateProductDto(stock=0, is_available=True))

        assert product.stock == 0
        assert product.is_available is False

    def test_update_product_without_stock_keeps_availability(self, product_repository):
        product = product_repository.update_product("2", UpdateProductDto(price=19.99))

        assert product.price == 19.99
        assert product.is_available is True

    def test_update_product_cannot_mark_in_stock_product_unavailable(self, product_repository):
        product = product_repository.update_product("2", UpdateProductDto(is_available=False))

        assert product.stock == 100
        assert product.is_available is True

    def test_update_product_cannot_mark_empty_product_available(self, product_repository):
        product_repository.update_product("2", UpdateProductDto(stock=0))

        product = product_repository.update_product("2", UpdateProductDto(is_available=True))

        assert product.is_available is False
        assert product not in product_repository.find_available_products()

    def test_returned_records_cannot_be_mutated(self, product_repository):
        laptop = product_repository.find_by_id("1")

        with pytest.raises(dataclasses.FrozenInstanceError):
            laptop.stock = 0

        assert product_repository.find_by_id("1").stock == 50

    def test_update_stock_adjusts_and_derives_availability(self, product_repository):
        product = product_repository.update_stock("3", -25)

        assert product.stock == 0
        assert product.is_available is False
        assert product_repository.update_stock("3", 5).is_available is True

    def test_update_stock_rejects_negative_result(self, product_repository):
        with pytest.raises(InsufficientStockError, match="Insufficient stock"):
            product_repository.update_stock("1", -60)

        laptop = product_repository.find_by_id("1")
        assert laptop.stock == 50
        assert laptop.is_available is True

    def test_update_stock_missing_product(self, product_repository):
        assert product_repository.update_stock("404", 1) is None


class TestConcurrentAccess:
    WORKERS = 8

    def _run_together(self, task):
        barrier = threading.Barrier(self.WORKERS)

        def run():
            barrier.wait()
            return task()

        with ThreadPoolExecutor(max_workers=self.WORKERS) as pool:
            futures = [pool.submit(run) for _ in range(self.WORKERS)]
        return [future.exception() or future.result() for future in futures]

    def test_same_email_is_registered_once(self, user_repository):
        def register():
            return user_repository.create_user(CreateUserDto(email="race@example.com", name="Racer"))

        outcomes = self._run_together(register)

        created = [outcome for outcome in outcomes if not isinstance(outcome, Exception)]
        rejected = [outcome for outcome in outcomes if isinstance(outcome, DuplicateEmailError)]
        assert len(created) == 1
        assert len(rejected) == self.WORKERS - 1
        assert len([user for user in user_repository.find_all() if user.email == "race@example.com"]) == 1

    def test_stock_never_drops_below_zero(self, product_repository):
        # Laptop Pro starts at 50, so only five of eight withdrawals of 10 fit.
        outcomes = self._run_together(lambda: product_repository.update_stock("1", -10))

        succeeded = [outcome for outcome in outcomes if not isinstance(outcome, Exception)]
        refused = [outcome for outcome in outcomes if isinstance(outcome, InsufficientStockError)]
        assert len(succeeded) == 5
        assert len(refused) == 3
        assert all(product.stock >= 0 for product in succeeded)
        laptop = product_repository.find_by_id("1")
        assert laptop.stock == 0
        assert laptop.is_available is False
