import logging
from typing import Optional, Sequence

from domain.entities import Author, Book, Genre
from domain.exceptions import BookCreationError
from domain.repositories import CatalogRepository
from domain.services.field_validator import NewBookFields
from domain.use_cases.resolve_entities import EntityResolver

logger = logging.getLogger(__name__)


class CreateBookUseCase:
    """Create a book, reusing its author and genre when they already exist"""

    def __init__(self, catalog_repository: CatalogRepository, resolver: Optional[EntityResolver] = None):
        self.catalog_repository = catalog_repository
        self.resolver = resolver or EntityResolver(catalog_repository)

    async def create_book(self, fields: NewBookFields, author: Author, genres: Sequence[Genre]) -> Book:
        """Persist a book referencing already resolved entities"""
        book = Book(
            id=None,
            title=fields.book_title,
            author=author,
            genres=list(genres),
            summary=fields.summary,
            isbn=fields.isbn,
        )
        return await self.catalog_repository.create_book(book)

    async def execute(self, fields: NewBookFields) -> Book:
        """Resolve the author and genre, then create the book.

        Steps are not transactional: an author or genre created here is kept
        even if saving the book fails afterwards.

        Raises:
            BookCreationError: Any step failed
        """
        try:
            author = await self.resolver.resolve_author(fields.family_name, fields.first_name)
            genre = await self.resolver.resolve_genre(fields.genre_name)
            book = await self.create_book(fields, author, [genre])
        except Exception as e:
            logger.exception(f"Failed to create book '{fields.book_title}': {e}")
            raise BookCreationError(fields.book_title) from e

        logger.info(f"Created book {book.id} ('{book.title}')")
        return book
