import logging
from typing import Optional

from config.settings import settings
from domain.repositories import CatalogRepository
from infrastructure.database.in_memory_repository import InMemoryCatalogRepository
from infrastructure.database.neo4j_repository import Neo4jCatalogRepository

logger = logging.getLogger(__name__)

_catalog_repository: Optional[CatalogRepository] = None


def get_catalog_repository() -> CatalogRepository:
    """Get the process-wide catalog repository"""
    global _catalog_repository
    if _catalog_repository is None:
        if settings.use_in_memory_store:
            logger.info("Neo4j not configured or USE_MOCK_NEO4J set, using in-memory store")
            _catalog_repository = InMemoryCatalogRepository()
        else:
            _catalog_repository = Neo4jCatalogRepository(
                settings.neo4j_uri, settings.neo4j_user, settings.neo4j_password
            )
    return _catalog_repository


async def close_catalog_repository() -> None:
    global _catalog_repository
    if _catalog_repository is not None:
        await _catalog_repository.close()
        _catalog_repository = None
