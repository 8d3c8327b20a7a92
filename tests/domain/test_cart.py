"""Unit tests for the Cart aggregate."""

import random
from decimal import Decimal

from storefront.domain.model.cart import Cart
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money


def _product(pid: int = 1, price: str = "10.00", name: str | None = None) -> Product:
    return Product(id=pid, name=name or f"Product {pid}", price=Money.of(price), image=f"img{pid}.jpg")


class TestCartAdd:

    def test_add_creates_line_with_quantity_one(self):
        cart = Cart()
        cart.add(_product(1))
        assert len(cart) == 1
        assert cart.get(1).quantity == 1

    def test_add_twice_merges_into_one_line(self):
        cart = Cart()
        p = _product(1)
        cart.add(p)
        cart.add(p)
        assert len(cart.lines) == 1
        assert cart.get(1).quantity == 2

    def test_lines_keep_insertion_order(self):
        cart = Cart()
        for pid in (3, 1, 2):
            cart.add(_product(pid))
        cart.add(_product(3))
        assert [line.product_id for line in cart.lines] == [3, 1, 2]

    def test_line_snapshots_product_attributes(self):
        cart = Cart()
        cart.add(_product(1, price="10.00", name="Widget"))
        # a later catalog price does not change the existing line
        cart.add(_product(1, price="99.00", name="Widget v2"))
        line = cart.get(1)
        assert line.name == "Widget"
        assert line.unit_price == Money.of("10.00")
        assert line.image == "img1.jpg"


class TestCartRemoveAndSetQuantity:

    def test_remove_deletes_line(self):
        cart = Cart()
        cart.add(_product(1))
        cart.remove(1)
        assert cart.is_empty

    def test_remove_absent_is_noop(self):
        cart = Cart()
        cart.add(_product(1))
        cart.remove(42)
        assert len(cart) == 1

    def test_set_quantity_replaces_quantity_only(self):
        cart = Cart()
        cart.add(_product(1, price="4.00"))
        cart.set_quantity(1, 5)
        line = cart.get(1)
        assert line.quantity == 5
        assert line.unit_price == Money.of("4.00")

    def test_set_quantity_zero_equals_remove(self):
        a, b = Cart(), Cart()
        for cart in (a, b):
            cart.add(_product(1))
            cart.add(_product(2))
        a.set_quantity(1, 0)
        b.remove(1)
        assert a.lines == b.lines

    def test_set_quantity_negative_removes(self):
        cart = Cart()
        cart.add(_product(1))
        cart.set_quantity(1, -4)
        assert 1 not in cart

    def test_set_quantity_absent_is_noop(self):
        cart = Cart()
        cart.set_quantity(7, 3)
        assert cart.is_empty

    def test_clear(self):
        cart = Cart()
        cart.add(_product(1))
        cart.add(_product(2))
        cart.clear()
        assert cart.is_empty
        assert cart.total() == Money.zero()


class TestCartTotal:

    def test_total_is_sum_of_price_times_quantity(self):
        cart = Cart()
        cart.add(_product(1, price="10.00"))
        cart.add(_product(1, price="10.00"))
        cart.add(_product(2, price="5.00"))
        assert cart.total() == Money.of("25.00")
        assert cart.item_count == 3
        assert cart.line_count == 2

    def test_total_has_no_float_drift(self):
        cart = Cart()
        for pid in range(1, 101):
            cart.add(_product(pid, price="0.10"))
        assert cart.total().amount == Decimal("10.00")

    def test_total_independent_of_operation_order(self):
        products = [_product(pid, price=f"{pid}.33") for pid in range(1, 6)]
        target = {1: 3, 2: 1, 3: 4, 4: 2, 5: 1}

        def build(order):
            cart = Cart()
            for pid in order:
                cart.add(products[pid - 1])
            return cart

        forward = build([pid for pid, qty in target.items() for _ in range(qty)])
        shuffled_ops = [pid for pid, qty in target.items() for _ in range(qty)]
        random.Random(7).shuffle(shuffled_ops)
        shuffled = build(shuffled_ops)

        via_set = Cart()
        for pid in reversed(list(target)):
            via_set.add(products[pid - 1])
            via_set.set_quantity(pid, target[pid])

        assert forward.total() == shuffled.total() == via_set.total()


class TestCartInvariants:

    def test_random_mutations_keep_unique_lines_and_positive_quantities(self):
        rng = random.Random(1234)
        products = [_product(pid) for pid in range(1, 6)]
        cart = Cart()
        for _ in range(500):
            op = rng.choice(["add", "remove", "set"])
            pid = rng.randint(1, 5)
            if op == "add":
                cart.add(products[pid - 1])
            elif op == "remove":
                cart.remove(pid)
            else:
                cart.set_quantity(pid, rng.randint(-2, 6))

            ids = [line.product_id for line in cart.lines]
            assert len(ids) == len(set(ids))
            assert all(line.quantity >= 1 for line in cart.lines)


class TestCartObservers:

    def test_listener_sees_post_mutation_state(self):
        cart = Cart()
        seen = []
        cart.subscribe(lambda c: seen.append((c.item_count, c.total())))

        cart.add(_product(1, price="2.50"))
        cart.add(_product(1, price="2.50"))
        cart.set_quantity(1, 4)
        cart.remove(1)

        assert seen == [
            (1, Money.of("2.50")),
            (2, Money.of("5.00")),
            (4, Money.of("10.00")),
            (0, Money.zero()),
        ]

    def test_noop_mutations_do_not_notify(self):
        cart = Cart()
        calls = []
        cart.subscribe(calls.append)
        cart.remove(1)
        cart.set_quantity(1, 3)
        cart.clear()
        assert calls == []

    def test_unsubscribe(self):
        cart = Cart()
        calls = []
        unsubscribe = cart.subscribe(calls.append)
        unsubscribe()
        cart.add(_product(1))
        assert calls == []
