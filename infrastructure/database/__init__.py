from .in_memory_repository import InMemoryCatalogRepository
from .neo4j_repository import Neo4jCatalogRepository
from .repository_factory import close_catalog_repository, get_catalog_repository

__all__ = [
    "InMemoryCatalogRepository",
    "Neo4jCatalogRepository",
    "close_catalog_repository",
    "get_catalog_repository",
]
