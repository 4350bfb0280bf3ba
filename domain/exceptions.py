"""
Error taxonomy for the catalog domain.

``InputRejectedError`` and its subclasses are raised before any persistence
call and map to 400 responses. ``BookNotFoundError`` maps to 404.
``PersistenceError`` is raised by repository adapters; the use cases wrap it
into ``BookCreationError`` / ``BookLookupError``, whose messages are safe to
return to callers.
"""


class CatalogError(Exception):
    """Base class for all catalog errors"""


class InputRejectedError(CatalogError):
    """Client input failed validation"""


class EmptyInputError(InputRejectedError):
    pass


class MalformedIdError(InputRejectedError):
    pass


class MissingFieldError(InputRejectedError):
    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__(f"Missing required field: {field_name}")


class InvalidTypeError(InputRejectedError):
    def __init__(self, message: str, field_name: str = None):
        self.field_name = field_name
        super().__init__(message)


class InvalidInputError(InputRejectedError):
    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__(f"Invalid input: {field_name} must not contain markup")


class BookNotFoundError(CatalogError):
    def __init__(self, book_id: str):
        self.book_id = book_id
        super().__init__(f"Book {book_id} not found")


class PersistenceError(CatalogError):
    """The backing store failed a lookup or write"""


class BookCreationError(CatalogError):
    def __init__(self, title: str):
        self.title = title
        super().__init__(f"Error creating book: {title}")


class BookLookupError(CatalogError):
    def __init__(self, book_id: str):
        self.book_id = book_id
        super().__init__(f"Error fetching book {book_id}")
