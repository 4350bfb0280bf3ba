from .book_schemas import AuthorResponse, BookDetailsResponse, BookResponse, CopyResponse, GenreResponse

__all__ = ["AuthorResponse", "BookDetailsResponse", "BookResponse", "CopyResponse", "GenreResponse"]
