"""
Book API endpoints
"""
from decimal import Decimal
from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session
from typing import List

from bookstore.database import get_db
from bookstore.services.book_service import BookService, DEFAULT_LOW_STOCK_THRESHOLD
from bookstore.schemas.book import BookCreate, BookUpdate, BookResponse

router = APIRouter(prefix="/api/books", tags=["books"])


def get_book_service(db: Session = Depends(get_db)) -> BookService:
    """Dependency to get BookService instance"""
    return BookService(db)


@router.post("", response_model=BookResponse, status_code=status.HTTP_201_CREATED, summary="Create book")
def create_book(
    book_data: BookCreate,
    service: BookService = Depends(get_book_service)
):
    """
    Create a new book

    - **title**, **author**, **isbn**, **category**: required
    - **price**: required, positive, at most 2 decimal places
    - **stockQuantity**: non-negative (default 0)
    """
    return service.create_book(book_data)


@router.get("", response_model=List[BookResponse], summary="Get all books")
def get_books(
    skip: int = Query(0, ge=0, description="Number of books to skip"),
    limit: int = Query(100, ge=1, le=1000, description="Maximum number of books to return"),
    service: BookService = Depends(get_book_service)
):
    """Retrieve all books with pagination"""
    return service.get_all_books(skip=skip, limit=limit)


# Fixed paths are registered before /{book_id} so they are not read as IDs

@router.get("/search/author/{author}", response_model=List[BookResponse], summary="Search books by author")
def search_by_author(author: str, service: BookService = Depends(get_book_service)):
    """Case-insensitive substring match on author"""
    return service.find_books_by_author(author)


@router.get("/search/title/{title}", response_model=List[BookResponse], summary="Search books by title")
def search_by_title(title: str, service: BookService = Depends(get_book_service)):
    """Case-insensitive substring match on title"""
    return service.find_books_by_title(title)


@router.get("/category/{category}", response_model=List[BookResponse], summary="Get books by category")
def get_books_by_category(category: str, service: BookService = Depends(get_book_service)):
    """Exact match on category"""
    return service.search_by_category(category)


@router.get("/price-range", response_model=List[BookResponse], summary="Get books in a price range")
def get_books_by_price_range(
    min_price: Decimal = Query(..., alias="minPrice", description="Lower bound (inclusive)"),
    max_price: Decimal = Query(..., alias="maxPrice", description="Upper bound (inclusive)"),
    service: BookService = Depends(get_book_service)
):
    """Books priced between minPrice and maxPrice; minPrice must not exceed maxPrice"""
    return service.find_by_price_range(min_price, max_price)


@router.get("/low-stock", response_model=List[BookResponse], summary="Get low stock books")
def get_low_stock_books(
    threshold: int = Query(DEFAULT_LOW_STOCK_THRESHOLD, description="Stock below this value is low"),
    service: BookService = Depends(get_book_service)
):
    """Books whose stock is below threshold; threshold must not be negative"""
    return service.find_low_stock_books(threshold)


@router.get("/isbn/{isbn}", response_model=BookResponse, summary="Get book by ISBN")
def get_book_by_isbn(isbn: str, service: BookService = Depends(get_book_service)):
    """Retrieve a book by its ISBN"""
    return service.get_book_by_isbn(isbn)


@router.get("/{book_id}", response_model=BookResponse, summary="Get book by ID")
def get_book(book_id: int, service: BookService = Depends(get_book_service)):
    """Retrieve a specific book by ID"""
    return service.get_book_by_id(book_id)


@router.put("/{book_id}", response_model=BookResponse, summary="Update book")
def update_book(
    book_id: int,
    book_data: BookUpdate,
    service: BookService = Depends(get_book_service)
):
    """Replace all fields of an existing book"""
    return service.update_book(book_id, book_data)


@router.delete("/{book_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete book")
def delete_book(book_id: int, service: BookService = Depends(get_book_service)):
    """Delete a book"""
    service.delete_book(book_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
