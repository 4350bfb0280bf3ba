"""
In-memory catalog store used when Neo4j is not configured, and in tests
"""

import logging
from dataclasses import replace
from typing import Dict, List, Optional

from domain.entities import Author, Book, BookInstance, BookInstanceStatus, Genre
from domain.exceptions import PersistenceError
from domain.repositories import CatalogRepository
from domain.services.object_id import generate_object_id

logger = logging.getLogger(__name__)


class InMemoryCatalogRepository(CatalogRepository):
    """Dict-backed store keeping records by id.

    Books keep only the ids of their author and genres; references are
    resolved again on every read.
    """

    def __init__(self):
        self.authors: Dict[str, Author] = {}
        self.genres: Dict[str, Genre] = {}
        self.books: Dict[str, dict] = {}
        self.book_instances: Dict[str, BookInstance] = {}
        logger.info("In-memory catalog store initialized")

    async def find_author(self, family_name: str, first_name: str) -> Optional[Author]:
        for author in self.authors.values():
            if author.family_name == family_name and author.first_name == first_name:
                return replace(author)
        return None

    async def create_author(self, family_name: str, first_name: str) -> Author:
        author = Author(id=generate_object_id(), family_name=family_name, first_name=first_name)
        self.authors[author.id] = author
        return replace(author)

    async def find_genre(self, name: str) -> Optional[Genre]:
        for genre in self.genres.values():
            if genre.name == name:
                return replace(genre)
        return None

    async def create_genre(self, name: str) -> Genre:
        genre = Genre(id=generate_object_id(), name=name)
        self.genres[genre.id] = genre
        return replace(genre)

    async def create_book(self, book: Book) -> Book:
        if book.author is None or book.author.id not in self.authors:
            raise PersistenceError(f"Author of book '{book.title}' does not exist")
        missing = [g.name for g in book.genres if g.id not in self.genres]
        if missing:
            raise PersistenceError(f"Unknown genres for book '{book.title}': {missing}")

        book_id = generate_object_id()
        self.books[book_id] = {
            "title": book.title,
            "summary": book.summary,
            "isbn": book.isbn,
            "author_id": book.author.id,
            "genre_ids": [g.id for g in book.genres],
        }
        return await self.get_book(book_id)

    async def get_book(self, book_id: str) -> Optional[Book]:
        record = self.books.get(book_id)
        if record is None:
            return None

        author = self.authors.get(record["author_id"])
        return Book(
            id=book_id,
            title=record["title"],
            summary=record["summary"],
            isbn=record["isbn"],
            author=replace(author) if author else None,
            genres=[replace(self.genres[gid]) for gid in record["genre_ids"] if gid in self.genres],
        )

    async def find_book_instances(self, book_id: str) -> List[BookInstance]:
        return [replace(i) for i in self.book_instances.values() if i.book_id == book_id]

    def add_book_instance(
        self, book_id: str, imprint: str, status: BookInstanceStatus = BookInstanceStatus.AVAILABLE
    ) -> BookInstance:
        """Seed a copy; the catalog itself never writes copies"""
        instance = BookInstance(id=generate_object_id(), book_id=book_id, imprint=imprint, status=status)
        self.book_instances[instance.id] = instance
        return replace(instance)

    async def verify_connectivity(self) -> bool:
        return True
