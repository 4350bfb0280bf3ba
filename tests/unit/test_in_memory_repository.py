import pytest

from domain.entities import Author, Book, BookInstanceStatus, Genre
from domain.exceptions import PersistenceError
from domain.services.object_id import is_valid_object_id
from infrastructure.database import InMemoryCatalogRepository


@pytest.fixture
def repository():
    return InMemoryCatalogRepository()


class TestInMemoryCatalogRepository:
    @pytest.mark.asyncio
    async def test_author_round_trip(self, repository):
        created = await repository.create_author("Tagore", "Robi")

        found = await repository.find_author("Tagore", "Robi")

        assert is_valid_object_id(created.id)
        assert found == created

    @pytest.mark.asyncio
    async def test_author_lookup_needs_both_names(self, repository):
        await repository.create_author("Tagore", "Robi")

        assert await repository.find_author("Tagore", "Rabindranath") is None
        assert await repository.find_author("tagore", "Robi") is None

    @pytest.mark.asyncio
    async def test_genre_round_trip(self, repository):
        created = await repository.create_genre("Fiction")

        assert await repository.find_genre("Fiction") == created
        assert await repository.find_genre("Poetry") is None

    @pytest.mark.asyncio
    async def test_returned_entities_are_copies(self, repository):
        created = await repository.create_genre("Fiction")
        created.name = "Changed"

        assert (await repository.find_genre("Fiction")).name == "Fiction"

    @pytest.mark.asyncio
    async def test_create_and_get_book(self, repository):
        author = await repository.create_author("Tagore", "Robi")
        genres = [await repository.create_genre("Fiction"), await repository.create_genre("Classic")]

        created = await repository.create_book(
            Book(id=None, title="Gora", author=author, genres=genres, summary="s", isbn="1")
        )
        fetched = await repository.get_book(created.id)

        assert fetched == created
        assert fetched.author == author
        assert [g.name for g in fetched.genres] == ["Fiction", "Classic"]

    @pytest.mark.asyncio
    async def test_create_book_with_unknown_author_fails(self, repository):
        author = Author(id="a" * 24, family_name="Nobody", first_name="")

        with pytest.raises(PersistenceError):
            await repository.create_book(Book(id=None, title="Gora", author=author))
        assert repository.books == {}

    @pytest.mark.asyncio
    async def test_create_book_with_unknown_genre_fails(self, repository):
        author = await repository.create_author("Tagore", "Robi")

        with pytest.raises(PersistenceError):
            await repository.create_book(
                Book(id=None, title="Gora", author=author, genres=[Genre(id="b" * 24, name="Ghost")])
            )

    @pytest.mark.asyncio
    async def test_get_missing_book(self, repository):
        assert await repository.get_book("0" * 24) is None

    @pytest.mark.asyncio
    async def test_book_instances_filtered_by_book(self, repository):
        repository.add_book_instance("1" * 24, "I1")
        repository.add_book_instance("1" * 24, "I2", BookInstanceStatus.LOANED)
        repository.add_book_instance("2" * 24, "Other")

        copies = await repository.find_book_instances("1" * 24)

        assert [(c.imprint, c.status) for c in copies] == [
            ("I1", BookInstanceStatus.AVAILABLE),
            ("I2", BookInstanceStatus.LOANED),
        ]

    @pytest.mark.asyncio
    async def test_verify_connectivity(self, repository):
        assert await repository.verify_connectivity() is True
