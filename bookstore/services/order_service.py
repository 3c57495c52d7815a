"""
Order Service - Business Logic Layer
"""
import logging
from decimal import Decimal
from typing import List, Optional, Sequence, Tuple
from sqlalchemy.orm import Session

from bookstore.database import transactional
from bookstore.exceptions import (
    BookstoreError,
    InvalidArgumentError,
    OrderValidationError,
    ResourceNotFoundError
)
from bookstore.models.order import Order, OrderItem, OrderStatus
from bookstore.repositories.book_repository import BookRepository
from bookstore.repositories.customer_repository import CustomerRepository
from bookstore.repositories.order_repository import OrderRepository
from bookstore.schemas.order import OrderCreate, OrderItemResponse, OrderResponse

logger = logging.getLogger(__name__)


class OrderService:
    """Service layer for order business logic"""

    def __init__(self, db: Session):
        self.db = db
        self.repository = OrderRepository(db)
        self.book_repository = BookRepository(db)
        self.customer_repository = CustomerRepository(db)

    def get_all_orders(
        self,
        status: Optional[OrderStatus] = None,
        skip: int = 0,
        limit: int = 100
    ) -> List[OrderResponse]:
        """Get all orders, optionally only those in one status"""
        if status is not None:
            orders = self.repository.get_by_status(status, skip=skip, limit=limit)
        else:
            orders = self.repository.get_all(skip=skip, limit=limit)
        return [self._to_response(o) for o in orders]

    def get_order_by_id(self, order_id: int) -> OrderResponse:
        """Get order by ID"""
        order = self.repository.get_by_id(order_id)
        if not order:
            raise ResourceNotFoundError("Order", "id", order_id)
        return self._to_response(order)

    def get_customer_orders(self, customer_id: int) -> List[OrderResponse]:
        """
        Get orders of a customer, newest first

        Raises:
            ResourceNotFoundError: If the customer does not exist
        """
        if not self.customer_repository.get_by_id(customer_id):
            raise ResourceNotFoundError("Customer", "id", customer_id)
        orders = self.repository.get_by_customer_id(customer_id)
        return [self._to_response(o) for o in orders]

    def create_order(self, order_data: OrderCreate) -> OrderResponse:
        """
        Place an order from either request shape

        ``items`` and the parallel ``book_ids``/``quantities`` arrays are
        equivalent; they are reduced to one list of (book_id, quantity)
        lines before placement.

        Raises:
            InvalidArgumentError: If both shapes are given or the arrays differ in length
        """
        has_arrays = order_data.book_ids is not None or order_data.quantities is not None

        if order_data.items is not None and has_arrays:
            raise InvalidArgumentError("Provide either items or bookIds/quantities, not both")

        if order_data.items is not None:
            lines = [(item.book_id, item.quantity) for item in order_data.items]
        elif has_arrays:
            book_ids = order_data.book_ids or []
            quantities = order_data.quantities or []
            if len(book_ids) != len(quantities):
                raise InvalidArgumentError(
                    f"bookIds and quantities must have the same length "
                    f"({len(book_ids)} != {len(quantities)})"
                )
            lines = list(zip(book_ids, quantities))
        else:
            lines = []

        return self.place_order(order_data.customer_id, lines, order_data.shipping_address)

    def place_order(
        self,
        customer_id: int,
        lines: Sequence[Tuple[int, int]],
        shipping_address: Optional[str] = None
    ) -> OrderResponse:
        """
        Place an order as one unit of work

        Steps:
        1. Resolve the customer
        2. Reject an empty cart
        3. For each line, in order: check quantity, resolve the book,
           check stock, decrement stock, capture the current price
        4. Save the order as PENDING with the summed total

        Any failure rolls back the whole transaction, so stock decremented
        for earlier lines is restored.

        Args:
            customer_id: Ordering customer
            lines: (book_id, quantity) pairs
            shipping_address: Defaults to the customer's address

        Returns:
            Created order

        Raises:
            ResourceNotFoundError: If the customer or a book does not exist
            OrderValidationError: If the cart is empty or a quantity is not positive
            InvalidArgumentError: If a book has insufficient stock
        """
        try:
            with transactional(self.db):
                customer = self.customer_repository.get_by_id(customer_id)
                if not customer:
                    raise ResourceNotFoundError("Customer", "id", customer_id)

                if not lines:
                    raise OrderValidationError("Cannot create order with empty cart")

                items = []
                total_amount = Decimal("0.00")

                for book_id, quantity in lines:
                    if quantity <= 0:
                        raise OrderValidationError(f"Quantity must be greater than 0 for book ID: {book_id}")

                    book = self.book_repository.get_by_id(book_id)
                    if not book:
                        raise ResourceNotFoundError("Book", "id", book_id)

                    if book.stock_quantity < quantity:
                        raise InvalidArgumentError(
                            f"Insufficient stock for book: {book.title}. "
                            f"Available: {book.stock_quantity}, Requested: {quantity}"
                        )

                    self.book_repository.decrease_stock(book, quantity)

                    item = OrderItem(book=book, quantity=quantity, price=book.price)
                    items.append(item)
                    total_amount += item.subtotal

                # Built last: attaching to the customer makes it flushable
                order = Order(
                    customer=customer,
                    status=OrderStatus.PENDING,
                    shipping_address=shipping_address or customer.address,
                    total_amount=total_amount,
                    items=items
                )
                self.repository.add(order)
        except BookstoreError as e:
            logger.warning("Order rejected for customer %s: %s", customer_id, e)
            raise

        self.db.refresh(order)
        logger.info(
            "Order placed: id=%s customer=%s lines=%d total=%s",
            order.id, customer_id, len(order.items), order.total_amount
        )
        return self._to_response(order)

    def update_order_status(self, order_id: int, new_status: OrderStatus) -> OrderResponse:
        """Move an order to another status"""
        order = self.repository.update_status(order_id, new_status)
        if not order:
            raise ResourceNotFoundError("Order", "id", order_id)
        logger.info("Order %s status changed to %s", order_id, new_status.value)
        return self._to_response(order)

    @staticmethod
    def _to_response(order: Order) -> OrderResponse:
        items = [
            OrderItemResponse(
                book_id=item.book_id,
                book_title=item.book.title,
                quantity=item.quantity,
                price=item.price,
                subtotal=item.subtotal
            )
            for item in order.items
        ]
        return OrderResponse(
            id=order.id,
            customer_id=order.customer_id,
            customer_name=order.customer.full_name,
            status=order.status,
            shipping_address=order.shipping_address,
            items=items,
            total_amount=order.total_amount,
            order_date=order.order_date
        )
