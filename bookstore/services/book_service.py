"""
Book Service - Business Logic Layer
"""
import logging
from decimal import Decimal
from typing import List
from sqlalchemy.orm import Session

from bookstore.exceptions import InvalidArgumentError, ResourceNotFoundError
from bookstore.repositories.book_repository import BookRepository
from bookstore.schemas.book import BookCreate, BookUpdate, BookResponse

logger = logging.getLogger(__name__)

DEFAULT_LOW_STOCK_THRESHOLD = 10


class BookService:
    """Service layer for book business logic"""

    def __init__(self, db: Session):
        self.repository = BookRepository(db)

    def get_all_books(self, skip: int = 0, limit: int = 100) -> List[BookResponse]:
        """Get all books with pagination"""
        books = self.repository.get_all(skip=skip, limit=limit)
        return [BookResponse.model_validate(b) for b in books]

    def get_book_by_id(self, book_id: int) -> BookResponse:
        """
        Get book by ID

        Raises:
            ResourceNotFoundError: If no book has this ID
        """
        book = self.repository.get_by_id(book_id)
        if not book:
            raise ResourceNotFoundError("Book", "id", book_id)
        return BookResponse.model_validate(book)

    def get_book_by_isbn(self, isbn: str) -> BookResponse:
        """
        Get book by ISBN

        Raises:
            ResourceNotFoundError: If no book has this ISBN
        """
        book = self.repository.get_by_isbn(isbn)
        if not book:
            raise ResourceNotFoundError("Book", "isbn", isbn)
        return BookResponse.model_validate(book)

    def create_book(self, book_data: BookCreate) -> BookResponse:
        """
        Create new book

        Raises:
            InvalidArgumentError: If the ISBN is already taken
        """
        if self.repository.get_by_isbn(book_data.isbn):
            raise InvalidArgumentError(f"ISBN already exists: {book_data.isbn}")

        book = self.repository.create(book_data)
        logger.info("Book created: id=%s isbn=%s", book.id, book.isbn)
        return BookResponse.model_validate(book)

    def update_book(self, book_id: int, book_data: BookUpdate) -> BookResponse:
        """
        Replace all fields of a book

        Raises:
            ResourceNotFoundError: If no book has this ID
            InvalidArgumentError: If the new ISBN belongs to another book
        """
        if not self.repository.get_by_id(book_id):
            raise ResourceNotFoundError("Book", "id", book_id)

        existing = self.repository.get_by_isbn(book_data.isbn)
        if existing and existing.id != book_id:
            raise InvalidArgumentError(f"ISBN already exists: {book_data.isbn}")

        book = self.repository.update(book_id, book_data)
        return BookResponse.model_validate(book)

    def delete_book(self, book_id: int) -> None:
        """
        Delete book

        Raises:
            ResourceNotFoundError: If no book has this ID
        """
        if not self.repository.delete(book_id):
            raise ResourceNotFoundError("Book", "id", book_id)
        logger.info("Book deleted: id=%s", book_id)

    def find_books_by_author(self, author: str) -> List[BookResponse]:
        """Case-insensitive substring match on author"""
        return [BookResponse.model_validate(b) for b in self.repository.search_by_author(author)]

    def find_books_by_title(self, title: str) -> List[BookResponse]:
        """Case-insensitive substring match on title"""
        return [BookResponse.model_validate(b) for b in self.repository.search_by_title(title)]

    def search_by_category(self, category: str) -> List[BookResponse]:
        """Exact match on category"""
        return [BookResponse.model_validate(b) for b in self.repository.get_by_category(category)]

    def find_by_price_range(self, min_price: Decimal, max_price: Decimal) -> List[BookResponse]:
        """
        Books priced between min_price and max_price, bounds included

        Raises:
            InvalidArgumentError: If min_price is greater than max_price
        """
        if min_price > max_price:
            raise InvalidArgumentError("Minimum price cannot be greater than maximum price")
        books = self.repository.get_by_price_range(min_price, max_price)
        return [BookResponse.model_validate(b) for b in books]

    def find_low_stock_books(self, threshold: int = DEFAULT_LOW_STOCK_THRESHOLD) -> List[BookResponse]:
        """
        Books whose stock is strictly below threshold

        Raises:
            InvalidArgumentError: If threshold is negative
        """
        if threshold < 0:
            raise InvalidArgumentError("Stock threshold cannot be negative")
        books = self.repository.get_low_stock(threshold)
        return [BookResponse.model_validate(b) for b in books]
