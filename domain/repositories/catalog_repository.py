from abc import ABC, abstractmethod
from typing import List, Optional

from domain.entities import Author, Book, BookInstance, Genre


class CatalogRepository(ABC):
    """Persistence collaborator for the catalog.

    Adapters raise ``PersistenceError`` when the backing store fails.
    """

    @abstractmethod
    async def find_author(self, family_name: str, first_name: str) -> Optional[Author]:
        pass

    @abstractmethod
    async def create_author(self, family_name: str, first_name: str) -> Author:
        pass

    @abstractmethod
    async def find_genre(self, name: str) -> Optional[Genre]:
        pass

    @abstractmethod
    async def create_genre(self, name: str) -> Genre:
        pass

    @abstractmethod
    async def create_book(self, book: Book) -> Book:
        """Persist a book whose author and genres already exist"""
        pass

    @abstractmethod
    async def get_book(self, book_id: str) -> Optional[Book]:
        pass

    @abstractmethod
    async def find_book_instances(self, book_id: str) -> List[BookInstance]:
        pass

    @abstractmethod
    async def verify_connectivity(self) -> bool:
        pass

    async def close(self) -> None:
        pass
