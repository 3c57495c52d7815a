"""
Order Repository - Data Access Layer
"""
from typing import List, Optional
from sqlalchemy.orm import Session, selectinload
from sqlalchemy import desc

from bookstore.models.order import Order, OrderItem, OrderStatus


class OrderRepository:
    """Repository for Order persistence and lookups"""

    def __init__(self, db: Session):
        self.db = db

    def _query(self):
        return self.db.query(Order).options(
            selectinload(Order.customer),
            selectinload(Order.items).selectinload(OrderItem.book)
        )

    def get_all(self, skip: int = 0, limit: int = 100) -> List[Order]:
        """Get all orders with pagination"""
        return self._query().order_by(Order.id).offset(skip).limit(limit).all()

    def get_by_id(self, order_id: int) -> Optional[Order]:
        """Get order by ID"""
        return self._query().filter(Order.id == order_id).first()

    def get_by_status(self, status: OrderStatus, skip: int = 0, limit: int = 100) -> List[Order]:
        """Get orders by status with pagination"""
        return self._query().filter(
            Order.status == status
        ).order_by(Order.id).offset(skip).limit(limit).all()

    def get_by_customer_id(self, customer_id: int) -> List[Order]:
        """Get orders of a customer, newest first"""
        return self._query().filter(
            Order.customer_id == customer_id
        ).order_by(desc(Order.order_date), desc(Order.id)).all()

    def add(self, order: Order) -> Order:
        """
        Stage a new order (and its items) in the current transaction

        Does not commit; the caller's transaction scope does.
        """
        self.db.add(order)
        self.db.flush()
        return order

    def update_status(self, order_id: int, new_status: OrderStatus) -> Optional[Order]:
        """Update order status"""
        order = self.get_by_id(order_id)
        if not order:
            return None

        order.status = new_status
        self.db.commit()
        self.db.refresh(order)
        return order
