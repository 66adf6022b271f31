"""Tests for the Cart Store."""

import json
import random
from decimal import Decimal

import pytest

from storefront.cart.snapshots import FileSnapshotStore, MemorySnapshotStore
from storefront.cart.store import CART_KEY, CartStore, UnknownSupplierError


class TestAdd:
    def test_add_new_line(self, cart_store, wallet):
        item = cart_store.add(wallet)
        assert len(cart_store.items) == 1
        assert item.product_id == "prod-wallet"
        assert item.quantity == 1
        assert item.price == "10.00"
        assert item.selected_supplier_id is None
        assert cart_store.total == Decimal("10.00")

    def test_same_product_merges(self, cart_store, wallet):
        first = cart_store.add(wallet)
        second = cart_store.add(wallet, quantity=2)
        assert first.id == second.id
        assert len(cart_store.items) == 1
        assert cart_store.items[0].quantity == 3
        assert cart_store.total == Decimal("30.00")

    def test_distinct_products_get_distinct_ids(self, cart_store, wallet, sunglasses):
        a = cart_store.add(wallet)
        b = cart_store.add(sunglasses)
        assert a.id != b.id

    def test_numeric_price_is_accepted(self, cart_store, sunglasses):
        cart_store.add(sunglasses, quantity=3)
        assert cart_store.total == Decimal("15")

    @pytest.mark.parametrize("quantity", [0, -1])
    def test_non_positive_quantity_ignored(self, cart_store, wallet, quantity):
        assert cart_store.add(wallet, quantity=quantity) is None
        assert cart_store.items == []

    def test_service_flag_carried(self, cart_store, cleaning):
        assert cart_store.add(cleaning).is_service is True

    def test_notifies(self, cart_store, notifier, wallet):
        cart_store.add(wallet)
        assert notifier.last.title == "Added to cart"
        assert notifier.last.description == "Leather Wallet has been added to your cart."


class TestRemoveAndQuantity:
    def test_remove(self, cart_store, wallet, sunglasses):
        item = cart_store.add(wallet)
        cart_store.add(sunglasses)
        cart_store.remove(item.id)
        assert [i.product_id for i in cart_store.items] == ["prod-sun"]
        assert cart_store.total == Decimal("5")

    def test_remove_unknown_is_noop(self, cart_store, wallet):
        cart_store.add(wallet)
        cart_store.remove("nope")
        assert len(cart_store.items) == 1

    def test_set_quantity(self, cart_store, wallet):
        item = cart_store.add(wallet)
        cart_store.set_quantity(item.id, 4)
        assert cart_store.items[0].quantity == 4
        assert cart_store.total == Decimal("40.00")
        assert cart_store.item_count == 4

    @pytest.mark.parametrize("quantity", [0, -3])
    def test_set_quantity_below_one_ignored(self, cart_store, wallet, quantity):
        item = cart_store.add(wallet, quantity=2)
        cart_store.set_quantity(item.id, quantity)
        assert cart_store.items[0].quantity == 2

    def test_clear(self, cart_store, wallet):
        cart_store.add(wallet)
        cart_store.clear()
        assert cart_store.items == []
        assert cart_store.total == Decimal("0")


class TestSupplierSelection:
    def test_set_supplier_keeps_total(self, cart_store, wallet):
        item = cart_store.add(wallet, quantity=2)
        cart_store.set_supplier(item.id, 3)
        assert cart_store.items[0].selected_supplier_id == 3
        assert cart_store.total == Decimal("20.00")

    def test_unknown_supplier_rejected(self, cart_store, wallet):
        item = cart_store.add(wallet)
        with pytest.raises(UnknownSupplierError):
            cart_store.set_supplier(item.id, 99)
        assert cart_store.items[0].selected_supplier_id is None


class TestTotals:
    def test_example_cart(self, cart_store, wallet, sunglasses):
        cart_store.add(wallet, quantity=2)
        cart_store.add(sunglasses)
        assert cart_store.total == Decimal("25.00")
        assert cart_store.item_count == 3

    def test_total_tracks_random_mutations(self, cart_store):
        rng = random.Random(20240501)
        products = [{"id": f"p{n}", "name": f"P{n}", "price": f"{n}.{n}5"} for n in range(1, 6)]

        for _ in range(200):
            action = rng.choice(["add", "remove", "quantity"])
            if action == "add":
                cart_store.add(rng.choice(products), quantity=rng.randint(-1, 3))
            elif cart_store.items:
                item = rng.choice(cart_store.items)
                if action == "remove":
                    cart_store.remove(item.id)
                else:
                    cart_store.set_quantity(item.id, rng.randint(-1, 5))

            expected = sum((Decimal(i.price) * i.quantity for i in cart_store.items), Decimal("0"))
            assert cart_store.total == expected
            assert all(i.quantity >= 1 for i in cart_store.items)
            assert len({i.product_id for i in cart_store.items}) == len(cart_store.items)


class TestSnapshots:
    def test_every_mutation_is_persisted(self, cart_store, snapshots, wallet):
        item = cart_store.add(wallet)
        assert json.loads(snapshots.get(CART_KEY))["items"][0]["quantity"] == 1

        cart_store.set_quantity(item.id, 5)
        assert json.loads(snapshots.get(CART_KEY))["items"][0]["quantity"] == 5

        cart_store.remove(item.id)
        assert json.loads(snapshots.get(CART_KEY))["items"] == []

    def test_reload(self, cart_store, snapshots, notifier, wallet):
        item = cart_store.add(wallet, quantity=2)
        cart_store.set_supplier(item.id, 1)

        reloaded = CartStore(snapshots, notifier)
        assert reloaded.items[0].id == item.id
        assert reloaded.items[0].selected_supplier_id == 1
        assert reloaded.total == Decimal("20.00")

    def test_stored_total_is_ignored(self):
        snapshot = {
            "items": [{"id": "a", "product_id": "p", "name": "P", "price": "2.50", "quantity": 2}],
            "total": "999",
        }
        store = CartStore(MemorySnapshotStore({CART_KEY: json.dumps(snapshot)}))
        assert store.total == Decimal("5.00")

    @pytest.mark.parametrize(
        "raw",
        [
            "{not json",
            json.dumps({"items": [{"id": "a", "name": "no product id"}]}),
            json.dumps({"items": [{"id": "a", "product_id": "p", "name": "P", "price": "x", "quantity": 1}]}),
            json.dumps({"items": [{"id": "a", "product_id": "p", "name": "P", "price": "1", "quantity": 0}]}),
        ],
    )
    def test_corrupt_snapshot_is_discarded(self, raw):
        snapshots = MemorySnapshotStore({CART_KEY: raw})
        store = CartStore(snapshots)
        assert store.items == []
        assert snapshots.get(CART_KEY) is None

    def test_undecodable_file_snapshot_is_discarded(self, tmp_path):
        (tmp_path / "cart.json").write_bytes(b'{"items": [\xff\xfe]}')

        store = CartStore(FileSnapshotStore(tmp_path))

        assert store.items == []
        assert not (tmp_path / "cart.json").exists()

    def test_file_snapshots(self, tmp_path, wallet):
        store = CartStore(FileSnapshotStore(tmp_path / "state"))
        store.add(wallet, quantity=2)
        assert (tmp_path / "state" / "cart.json").exists()

        reloaded = CartStore(FileSnapshotStore(tmp_path / "state"))
        assert reloaded.total == Decimal("20.00")

    def test_file_snapshot_delete(self, tmp_path):
        snapshots = FileSnapshotStore(tmp_path)
        snapshots.set(CART_KEY, "{}")
        snapshots.delete(CART_KEY)
        snapshots.delete(CART_KEY)
        assert snapshots.get(CART_KEY) is None
