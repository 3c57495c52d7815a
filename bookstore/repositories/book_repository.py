"""
Book Repository - Data Access Layer
"""
from decimal import Decimal
from typing import List, Optional
from sqlalchemy.orm import Session

from bookstore.exceptions import InvalidArgumentError
from bookstore.models.book import Book
from bookstore.schemas.book import BookCreate, BookUpdate


class BookRepository:
    """Repository for Book CRUD operations and derived queries"""

    def __init__(self, db: Session):
        self.db = db

    def get_all(self, skip: int = 0, limit: int = 100) -> List[Book]:
        """Get all books with pagination"""
        return self.db.query(Book).order_by(Book.id).offset(skip).limit(limit).all()

    def get_by_id(self, book_id: int) -> Optional[Book]:
        """Get book by ID"""
        return self.db.query(Book).filter(Book.id == book_id).first()

    def get_by_isbn(self, isbn: str) -> Optional[Book]:
        """Get book by ISBN"""
        return self.db.query(Book).filter(Book.isbn == isbn).first()

    def get_by_category(self, category: str) -> List[Book]:
        """Get books whose category matches exactly"""
        return self.db.query(Book).filter(Book.category == category).order_by(Book.id).all()

    def search_by_author(self, author: str) -> List[Book]:
        """Get books whose author contains the fragment, ignoring case"""
        return self.db.query(Book).filter(
            Book.author.icontains(author, autoescape=True)
        ).order_by(Book.id).all()

    def search_by_title(self, title: str) -> List[Book]:
        """Get books whose title contains the fragment, ignoring case"""
        return self.db.query(Book).filter(
            Book.title.icontains(title, autoescape=True)
        ).order_by(Book.id).all()

    def get_by_price_range(self, min_price: Decimal, max_price: Decimal) -> List[Book]:
        """Get books priced within [min_price, max_price]"""
        return self.db.query(Book).filter(
            Book.price.between(min_price, max_price)
        ).order_by(Book.price, Book.id).all()

    def get_low_stock(self, threshold: int) -> List[Book]:
        """Get books with stock strictly below threshold"""
        return self.db.query(Book).filter(
            Book.stock_quantity < threshold
        ).order_by(Book.stock_quantity, Book.id).all()

    def create(self, book_data: BookCreate) -> Book:
        """Create new book"""
        book = Book(**book_data.model_dump())
        self.db.add(book)
        self.db.commit()
        self.db.refresh(book)
        return book

    def update(self, book_id: int, book_data: BookUpdate) -> Optional[Book]:
        """Replace all fields of an existing book"""
        book = self.get_by_id(book_id)
        if not book:
            return None

        for field, value in book_data.model_dump().items():
            setattr(book, field, value)

        self.db.commit()
        self.db.refresh(book)
        return book

    def delete(self, book_id: int) -> bool:
        """Delete book"""
        book = self.get_by_id(book_id)
        if not book:
            return False

        self.db.delete(book)
        self.db.commit()
        return True

    def decrease_stock(self, book: Book, quantity: int) -> Book:
        """
        Subtract quantity from a book's stock without committing

        The caller owns the transaction; the change is flushed so later
        queries in the same unit of work see it.

        Raises:
            InvalidArgumentError: If resulting stock would be negative
        """
        new_stock = book.stock_quantity - quantity
        if new_stock < 0:
            raise InvalidArgumentError(f"Insufficient stock. Current: {book.stock_quantity}, requested: {quantity}")

        book.stock_quantity = new_stock
        self.db.flush()
        return book
