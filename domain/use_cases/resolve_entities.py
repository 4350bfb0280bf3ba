import logging

from domain.entities import Author, Genre
from domain.repositories import CatalogRepository

logger = logging.getLogger(__name__)


class EntityResolver:
    """Find-or-create for authors and genres.

    There is no locking between the lookup and the insert, so two concurrent
    requests for the same new name can both create a record.
    """

    def __init__(self, catalog_repository: CatalogRepository):
        self.catalog_repository = catalog_repository

    async def resolve_author(self, family_name: str, first_name: str) -> Author:
        author = await self.catalog_repository.find_author(family_name, first_name)
        if author is not None:
            logger.debug(f"Reusing author {author.id} ({author.name})")
            return author

        author = await self.catalog_repository.create_author(family_name, first_name)
        logger.info(f"Created author {author.id} ({author.name})")
        return author

    async def resolve_genre(self, name: str) -> Genre:
        genre = await self.catalog_repository.find_genre(name)
        if genre is not None:
            logger.debug(f"Reusing genre {genre.id} ({genre.name})")
            return genre

        genre = await self.catalog_repository.create_genre(name)
        logger.info(f"Created genre {genre.id} ({genre.name})")
        return genre
