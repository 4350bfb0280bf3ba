import asyncio
import logging

from domain.entities import BookDetails
from domain.exceptions import BookLookupError, BookNotFoundError
from domain.repositories import CatalogRepository

logger = logging.getLogger(__name__)


class GetBookDetailsUseCase:
    def __init__(self, catalog_repository: CatalogRepository):
        self.catalog_repository = catalog_repository

    async def execute(self, book_id: str) -> BookDetails:
        """
        Fetch a book and its copies concurrently and join the results

        Raises:
            BookLookupError: Either lookup failed
            BookNotFoundError: No book has this id
        """
        book_result, copies_result = await asyncio.gather(
            self.catalog_repository.get_book(book_id),
            self.catalog_repository.find_book_instances(book_id),
            return_exceptions=True,
        )

        errors = [r for r in (book_result, copies_result) if isinstance(r, BaseException)]
        if errors:
            for error in errors:
                logger.error(f"Error fetching book {book_id}: {error!r}", exc_info=error)
            raise BookLookupError(book_id) from errors[0]

        if book_result is None:
            raise BookNotFoundError(book_id)

        return BookDetails(
            title=book_result.title,
            author=book_result.author.name if book_result.author else None,
            copies=list(copies_result),
        )
