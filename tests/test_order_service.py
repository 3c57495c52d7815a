from decimal import Decimal

import pytest

from bookstore.exceptions import InvalidArgumentError, OrderValidationError, ResourceNotFoundError
from bookstore.models import Order, OrderStatus
from bookstore.schemas.book import BookUpdate
from bookstore.schemas.order import OrderCreate
from conftest import make_book


def test_place_order_computes_totals_and_decrements_stock(order_service, book_service, customer, dune, neuromancer):
    order = order_service.place_order(customer.id, [(dune.id, 2), (neuromancer.id, 3)])

    assert order.status == OrderStatus.PENDING
    assert order.customer_name == "Ada Lovelace"
    assert order.shipping_address == "12 St James's Square, London"
    assert [(i.book_id, i.quantity) for i in order.items] == [(dune.id, 2), (neuromancer.id, 3)]
    for item in order.items:
        assert item.subtotal == item.price * item.quantity
    assert order.items[0].subtotal == Decimal("19.98")
    assert order.items[1].subtotal == Decimal("43.50")
    assert order.total_amount == sum(i.subtotal for i in order.items)
    assert order.total_amount == Decimal("63.48")

    assert book_service.get_book_by_id(dune.id).stock_quantity == 8
    assert book_service.get_book_by_id(neuromancer.id).stock_quantity == 0


def test_explicit_shipping_address_is_kept(order_service, customer, dune):
    order = order_service.place_order(customer.id, [(dune.id, 1)], shipping_address="PO Box 1")
    assert order.shipping_address == "PO Box 1"


def test_insufficient_stock_leaves_stock_unchanged(db, order_service, book_service, customer, neuromancer):
    with pytest.raises(InvalidArgumentError) as exc_info:
        order_service.place_order(customer.id, [(neuromancer.id, 4)])

    assert "Insufficient stock" in str(exc_info.value)
    assert book_service.get_book_by_id(neuromancer.id).stock_quantity == 3
    assert db.query(Order).count() == 0


def test_failure_on_later_line_rolls_back_earlier_decrements(db, order_service, book_service, customer, dune, neuromancer):
    with pytest.raises(InvalidArgumentError):
        order_service.place_order(customer.id, [(dune.id, 5), (neuromancer.id, 99)])

    assert book_service.get_book_by_id(dune.id).stock_quantity == 10
    assert book_service.get_book_by_id(neuromancer.id).stock_quantity == 3
    assert db.query(Order).count() == 0


def test_missing_book_rolls_back(order_service, book_service, customer, dune):
    with pytest.raises(ResourceNotFoundError):
        order_service.place_order(customer.id, [(dune.id, 1), (404, 1)])
    assert book_service.get_book_by_id(dune.id).stock_quantity == 10


def test_missing_customer_raises_not_found(order_service, dune):
    with pytest.raises(ResourceNotFoundError) as exc_info:
        order_service.place_order(12345, [(dune.id, 1)])
    assert "Customer" in str(exc_info.value)


def test_empty_cart_rejected(order_service, customer):
    with pytest.raises(OrderValidationError):
        order_service.place_order(customer.id, [])


@pytest.mark.parametrize("quantity", [0, -1])
def test_non_positive_quantity_rejected(order_service, book_service, customer, dune, quantity):
    with pytest.raises(OrderValidationError):
        order_service.place_order(customer.id, [(dune.id, 1), (dune.id, quantity)])
    assert book_service.get_book_by_id(dune.id).stock_quantity == 10


def test_same_book_on_two_lines_checks_running_stock(order_service, book_service, customer, neuromancer):
    with pytest.raises(InvalidArgumentError):
        order_service.place_order(customer.id, [(neuromancer.id, 2), (neuromancer.id, 2)])
    assert book_service.get_book_by_id(neuromancer.id).stock_quantity == 3


def test_both_request_shapes_are_equivalent(order_service, customer, dune, neuromancer):
    from_items = order_service.create_order(OrderCreate(
        customer_id=customer.id,
        items=[{"book_id": dune.id, "quantity": 1}, {"book_id": neuromancer.id, "quantity": 1}],
    ))
    from_arrays = order_service.create_order(OrderCreate(
        customer_id=customer.id,
        book_ids=[dune.id, neuromancer.id],
        quantities=[1, 1],
    ))

    assert from_items.total_amount == from_arrays.total_amount
    assert [(i.book_id, i.quantity) for i in from_items.items] == \
        [(i.book_id, i.quantity) for i in from_arrays.items]


def test_mismatched_parallel_arrays_rejected(order_service, book_service, customer, dune):
    with pytest.raises(InvalidArgumentError):
        order_service.create_order(OrderCreate(
            customer_id=customer.id,
            book_ids=[dune.id, dune.id],
            quantities=[1],
        ))
    assert book_service.get_book_by_id(dune.id).stock_quantity == 10


def test_request_without_lines_is_empty_cart(order_service, customer):
    with pytest.raises(OrderValidationError):
        order_service.create_order(OrderCreate(customer_id=customer.id))


def test_total_is_not_recomputed_when_price_changes(order_service, book_service, customer, dune):
    order = order_service.place_order(customer.id, [(dune.id, 2)])

    data = make_book(price=Decimal("50.00"), stock_quantity=8).model_dump()
    book_service.update_book(dune.id, BookUpdate(**data))

    again = order_service.get_order_by_id(order.id)
    assert again.total_amount == Decimal("19.98")
    assert again.items[0].price == Decimal("9.99")


def test_customer_orders_newest_first(order_service, customer, dune):
    first = order_service.place_order(customer.id, [(dune.id, 1)])
    second = order_service.place_order(customer.id, [(dune.id, 1)])

    orders = order_service.get_customer_orders(customer.id)
    assert [o.id for o in orders] == [second.id, first.id]

    with pytest.raises(ResourceNotFoundError):
        order_service.get_customer_orders(999)


def test_update_status_and_filter(order_service, customer, dune):
    order = order_service.place_order(customer.id, [(dune.id, 1)])

    shipped = order_service.update_order_status(order.id, OrderStatus.SHIPPED)

    assert shipped.status == OrderStatus.SHIPPED
    assert [o.id for o in order_service.get_all_orders(status=OrderStatus.SHIPPED)] == [order.id]
    assert order_service.get_all_orders(status=OrderStatus.PENDING) == []
    with pytest.raises(ResourceNotFoundError):
        order_service.update_order_status(555, OrderStatus.CANCELLED)


def test_status_filter_is_paginated(order_service, customer, dune):
    placed = [order_service.place_order(customer.id, [(dune.id, 1)]).id for _ in range(3)]

    first_page = order_service.get_all_orders(status=OrderStatus.PENDING, skip=0, limit=1)
    rest = order_service.get_all_orders(status=OrderStatus.PENDING, skip=1, limit=10)

    assert [o.id for o in first_page] == placed[:1]
    assert [o.id for o in rest] == placed[1:]
