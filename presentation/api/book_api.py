from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, Query
from fastapi.responses import PlainTextResponse

from domain.exceptions import BookCreationError, BookLookupError, BookNotFoundError, InputRejectedError
from domain.repositories import CatalogRepository
from domain.services import sanitize_book_id, validate_new_book
from domain.use_cases import CreateBookUseCase, GetBookDetailsUseCase
from infrastructure.database import get_catalog_repository
from presentation.schemas import BookDetailsResponse, BookResponse

router = APIRouter(tags=["books"])


def get_book_details_use_case(
    repo: CatalogRepository = Depends(get_catalog_repository),
) -> GetBookDetailsUseCase:
    """Dependency to get the book details use case"""
    return GetBookDetailsUseCase(repo)


def get_create_book_use_case(repo: CatalogRepository = Depends(get_catalog_repository)) -> CreateBookUseCase:
    """Dependency to get the create book use case"""
    return CreateBookUseCase(repo)


@router.get("/book_dtls", response_model=BookDetailsResponse)
async def get_book_details(
    book_id: Optional[str] = Query(None, alias="id", description="Book id (24 hex characters)"),
    use_case: GetBookDetailsUseCase = Depends(get_book_details_use_case),
):
    """Title, author name and copies of a book"""
    try:
        book_id = sanitize_book_id(book_id)
    except InputRejectedError as e:
        return PlainTextResponse(str(e), status_code=400)

    try:
        details = await use_case.execute(book_id)
    except BookNotFoundError as e:
        return PlainTextResponse(str(e), status_code=404)
    except BookLookupError as e:
        return PlainTextResponse(str(e), status_code=500)

    return BookDetailsResponse.from_entity(details)


@router.post("/newbook", response_model=BookResponse)
async def create_book(
    body: Any = Body(None),
    use_case: CreateBookUseCase = Depends(get_create_book_use_case),
):
    """Create a book, reusing an existing author and genre when the names match"""
    try:
        fields = validate_new_book(body)
    except InputRejectedError as e:
        return PlainTextResponse(str(e), status_code=400)

    try:
        book = await use_case.execute(fields)
    except BookCreationError as e:
        return PlainTextResponse(str(e), status_code=500)

    return BookResponse.from_entity(book)
