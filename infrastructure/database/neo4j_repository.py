"""
Neo4j catalog repository (async driver)

Graph layout:
    (:Book)-[:WRITTEN_BY]->(:Author)
    (:Book)-[:IN_GENRE {position}]->(:Genre)
    (:BookInstance {book_id})
Every node carries an ``id`` property in object id format.
"""

import logging
from dataclasses import replace
from typing import Any, Dict, List, Optional

from neo4j import AsyncGraphDatabase
from neo4j.exceptions import DriverError, Neo4jError

from domain.entities import Author, Book, BookInstance, BookInstanceStatus, Genre
from domain.exceptions import PersistenceError
from domain.repositories import CatalogRepository
from domain.services.object_id import generate_object_id

logger = logging.getLogger(__name__)

FIND_AUTHOR_QUERY = """
MATCH (a:Author {family_name: $family_name, first_name: $first_name})
RETURN a.id AS id, a.family_name AS family_name, a.first_name AS first_name
LIMIT 1
"""

CREATE_AUTHOR_QUERY = """
CREATE (a:Author {id: $id, family_name: $family_name, first_name: $first_name})
RETURN a.id AS id, a.family_name AS family_name, a.first_name AS first_name
"""

FIND_GENRE_QUERY = """
MATCH (g:Genre {name: $name})
RETURN g.id AS id, g.name AS name
LIMIT 1
"""

CREATE_GENRE_QUERY = """
CREATE (g:Genre {id: $id, name: $name})
RETURN g.id AS id, g.name AS name
"""

CREATE_BOOK_QUERY = """
MATCH (a:Author {id: $author_id})
CREATE (b:Book {id: $id, title: $title, summary: $summary, isbn: $isbn})
CREATE (b)-[:WRITTEN_BY]->(a)
RETURN b.id AS id
"""

LINK_GENRES_QUERY = """
MATCH (b:Book {id: $book_id})
UNWIND range(0, size($genre_ids) - 1) AS position
MATCH (g:Genre {id: $genre_ids[position]})
CREATE (b)-[:IN_GENRE {position: position}]->(g)
RETURN count(g) AS linked
"""

GET_BOOK_QUERY = """
MATCH (b:Book {id: $book_id})
OPTIONAL MATCH (b)-[:WRITTEN_BY]->(a:Author)
OPTIONAL MATCH (b)-[r:IN_GENRE]->(g:Genre)
WITH b, a, r, g
ORDER BY r.position
RETURN b {.id, .title, .summary, .isbn} AS book,
       a {.id, .family_name, .first_name} AS author,
       collect(g {.id, .name}) AS genres
"""

FIND_BOOK_INSTANCES_QUERY = """
MATCH (i:BookInstance {book_id: $book_id})
RETURN i.id AS id, i.book_id AS book_id, i.imprint AS imprint,
       i.status AS status, i.due_back AS due_back
ORDER BY i.imprint
"""


class Neo4jCatalogRepository(CatalogRepository):
    def __init__(self, uri: str, user: str, password: str, driver: Optional[Any] = None):
        self.uri = uri
        if driver is not None:
            self.driver = driver
        else:
            self.driver = AsyncGraphDatabase.driver(uri, auth=(user, password))
            logger.info(f"Neo4j driver created for {uri}")

    async def close(self) -> None:
        await self.driver.close()
        logger.info("Neo4j connection closed")

    async def verify_connectivity(self) -> bool:
        try:
            await self.driver.verify_connectivity()
            return True
        except (Neo4jError, DriverError) as e:
            logger.warning(f"Neo4j connectivity check failed: {e}")
            return False

    # ---------------------- Low-level helpers ----------------------
    async def _run(self, query: str, **params) -> List[Dict[str, Any]]:
        # Consume results inside the session; a lazy result is unusable after close
        try:
            async with self.driver.session() as session:
                result = await session.run(query, **params)
                return await result.data()
        except (Neo4jError, DriverError) as e:
            logger.error(f"Neo4j query failed: {e}")
            raise PersistenceError(f"Neo4j query failed: {e}") from e

    async def _single(self, query: str, **params) -> Optional[Dict[str, Any]]:
        rows = await self._run(query, **params)
        return rows[0] if rows else None

    @staticmethod
    def _to_author(row: Optional[Dict[str, Any]]) -> Optional[Author]:
        if not row:
            return None
        return Author(id=row["id"], family_name=row.get("family_name") or "", first_name=row.get("first_name") or "")

    @staticmethod
    def _to_genre(row: Optional[Dict[str, Any]]) -> Optional[Genre]:
        if not row:
            return None
        return Genre(id=row["id"], name=row["name"])

    @staticmethod
    def _to_book_instance(row: Dict[str, Any]) -> BookInstance:
        due_back = row.get("due_back")
        if hasattr(due_back, "to_native"):  # neo4j.time.Date
            due_back = due_back.to_native()
        return BookInstance(
            id=row["id"],
            book_id=row["book_id"],
            imprint=row["imprint"],
            status=BookInstanceStatus(row["status"]),
            due_back=due_back,
        )

    # ---------------------- Authors / genres ----------------------
    async def find_author(self, family_name: str, first_name: str) -> Optional[Author]:
        row = await self._single(FIND_AUTHOR_QUERY, family_name=family_name, first_name=first_name)
        return self._to_author(row)

    async def create_author(self, family_name: str, first_name: str) -> Author:
        row = await self._single(
            CREATE_AUTHOR_QUERY, id=generate_object_id(), family_name=family_name, first_name=first_name
        )
        if row is None:
            raise PersistenceError(f"Author {family_name}, {first_name} was not created")
        return self._to_author(row)

    async def find_genre(self, name: str) -> Optional[Genre]:
        return self._to_genre(await self._single(FIND_GENRE_QUERY, name=name))

    async def create_genre(self, name: str) -> Genre:
        row = await self._single(CREATE_GENRE_QUERY, id=generate_object_id(), name=name)
        if row is None:
            raise PersistenceError(f"Genre {name} was not created")
        return self._to_genre(row)

    # ---------------------- Books ----------------------
    async def create_book(self, book: Book) -> Book:
        if book.author is None:
            raise PersistenceError(f"Book '{book.title}' has no author")

        book_id = generate_object_id()
        genre_ids = [g.id for g in book.genres]

        async def create_tx(tx):
            result = await tx.run(
                CREATE_BOOK_QUERY,
                id=book_id,
                author_id=book.author.id,
                title=book.title,
                summary=book.summary,
                isbn=book.isbn,
            )
            if await result.single() is None:
                raise PersistenceError(f"Author {book.author.id} not found for book '{book.title}'")

            if genre_ids:
                result = await tx.run(LINK_GENRES_QUERY, book_id=book_id, genre_ids=genre_ids)
                record = await result.single()
                if record is None or record["linked"] != len(genre_ids):
                    raise PersistenceError(f"Could not link all genres of book '{book.title}'")

        try:
            async with self.driver.session() as session:
                await session.execute_write(create_tx)
        except (Neo4jError, DriverError) as e:
            logger.error(f"Failed to create book '{book.title}': {e}")
            raise PersistenceError(f"Failed to create book '{book.title}': {e}") from e

        return replace(book, id=book_id)

    async def get_book(self, book_id: str) -> Optional[Book]:
        row = await self._single(GET_BOOK_QUERY, book_id=book_id)
        if row is None or row.get("book") is None:
            return None

        data = row["book"]
        return Book(
            id=data["id"],
            title=data.get("title") or "",
            summary=data.get("summary") or "",
            isbn=data.get("isbn") or "",
            author=self._to_author(row.get("author")),
            genres=[self._to_genre(g) for g in row.get("genres") or [] if g],
        )

    async def find_book_instances(self, book_id: str) -> List[BookInstance]:
        rows = await self._run(FIND_BOOK_INSTANCES_QUERY, book_id=book_id)
        return [self._to_book_instance(row) for row in rows]
