"""
SQLAlchemy Book model
"""
from sqlalchemy import Column, Integer, String, Numeric, DateTime, Text, CheckConstraint
from sqlalchemy.sql import func
from bookstore.database import Base


class Book(Base):
    """Book database model"""

    __tablename__ = "books"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    title = Column(String(200), nullable=False, index=True)
    author = Column(String(100), nullable=False, index=True)
    isbn = Column(String(17), nullable=False, unique=True, index=True)
    category = Column(String(50), nullable=False, index=True)
    price = Column(Numeric(12, 2), nullable=False)
    stock_quantity = Column(Integer, nullable=False, default=0)
    description = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    # Constraints
    __table_args__ = (
        CheckConstraint('price > 0', name='check_book_price_positive'),
        CheckConstraint('stock_quantity >= 0', name='check_book_stock_non_negative'),
    )

    def __repr__(self):
        return f"<Book(id={self.id}, isbn='{self.isbn}', price={self.price}, stock={self.stock_quantity})>"
