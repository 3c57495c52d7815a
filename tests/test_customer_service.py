import pytest

from bookstore.exceptions import InvalidArgumentError, ResourceNotFoundError
from bookstore.models import Order, OrderItem
from bookstore.schemas.customer import CustomerUpdate
from conftest import make_customer


def test_create_and_fetch_customer(customer_service, customer):
    fetched = customer_service.get_customer_by_id(customer.id)

    assert fetched.first_name == "Ada"
    assert fetched.email == "ada@mail.com"
    assert fetched.phone_number == "+44 (20) 7946-0000"
    assert customer_service.find_customer_by_email("ada@mail.com").id == customer.id


def test_duplicate_email_rejected_and_original_unaffected(customer_service, customer):
    with pytest.raises(InvalidArgumentError):
        customer_service.create_customer(make_customer(first_name="Imposter"))

    original = customer_service.get_customer_by_id(customer.id)
    assert original.first_name == "Ada"
    assert len(customer_service.get_all_customers()) == 1


def test_email_lookup_and_duplicate_check_ignore_case(customer_service, customer):
    assert customer_service.find_customer_by_email("ADA@Mail.com").id == customer.id

    with pytest.raises(InvalidArgumentError):
        customer_service.create_customer(make_customer(email="Ada@mail.com"))


def test_missing_customer_raises_not_found(customer_service):
    with pytest.raises(ResourceNotFoundError):
        customer_service.get_customer_by_id(7)
    with pytest.raises(ResourceNotFoundError) as exc_info:
        customer_service.find_customer_by_email("nobody@mail.com")
    assert "email" in str(exc_info.value)


def test_update_keeping_own_email(customer_service, customer):
    data = make_customer(last_name="King", address=None).model_dump()

    updated = customer_service.update_customer(customer.id, CustomerUpdate(**data))

    assert updated.last_name == "King"
    assert updated.email == "ada@mail.com"
    assert updated.address is None


def test_update_to_email_of_other_customer_rejected(customer_service, customer):
    other = customer_service.create_customer(make_customer(email="charles@mail.com"))
    data = make_customer(email="ada@mail.com").model_dump()

    with pytest.raises(InvalidArgumentError):
        customer_service.update_customer(other.id, CustomerUpdate(**data))

    assert customer_service.get_customer_by_id(other.id).email == "charles@mail.com"


def test_delete_customer_cascades_to_orders(db, customer_service, order_service, customer, dune):
    order_service.place_order(customer.id, [(dune.id, 1)])
    order_service.place_order(customer.id, [(dune.id, 2)])
    assert db.query(Order).count() == 2

    customer_service.delete_customer(customer.id)

    assert db.query(Order).count() == 0
    assert db.query(OrderItem).count() == 0
    with pytest.raises(ResourceNotFoundError):
        customer_service.get_customer_by_id(customer.id)


def test_delete_missing_customer_raises_not_found(customer_service):
    with pytest.raises(ResourceNotFoundError):
        customer_service.delete_customer(99)
