from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from domain.entities import Author, Book, BookDetails, Genre


class CopyResponse(BaseModel):
    imprint: str
    status: str  # 'Available', 'Loaned', 'Maintained', 'Reserved'


class BookDetailsResponse(BaseModel):
    title: str
    author: Optional[str] = None
    copies: List[CopyResponse]

    @classmethod
    def from_entity(cls, details: BookDetails) -> "BookDetailsResponse":
        return cls(
            title=details.title,
            author=details.author,
            copies=[CopyResponse(imprint=c.imprint, status=c.status.value) for c in details.copies],
        )


class AuthorResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    family_name: str = Field(alias="familyName")
    first_name: str = Field(alias="firstName")
    name: str

    @classmethod
    def from_entity(cls, author: Author) -> "AuthorResponse":
        return cls(id=author.id, family_name=author.family_name, first_name=author.first_name, name=author.name)


class GenreResponse(BaseModel):
    id: str
    name: str

    @classmethod
    def from_entity(cls, genre: Genre) -> "GenreResponse":
        return cls(id=genre.id, name=genre.name)


class BookResponse(BaseModel):
    id: str
    title: str
    summary: str
    isbn: str
    author: Optional[AuthorResponse] = None
    genre: List[GenreResponse]

    @classmethod
    def from_entity(cls, book: Book) -> "BookResponse":
        return cls(
            id=book.id,
            title=book.title,
            summary=book.summary,
            isbn=book.isbn,
            author=AuthorResponse.from_entity(book.author) if book.author else None,
            genre=[GenreResponse.from_entity(g) for g in book.genres],
        )
