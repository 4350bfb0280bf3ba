from .create_book import CreateBookUseCase
from .get_book_details import GetBookDetailsUseCase
from .resolve_entities import EntityResolver

__all__ = ["CreateBookUseCase", "EntityResolver", "GetBookDetailsUseCase"]
