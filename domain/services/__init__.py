from .field_validator import NewBookFields, validate_new_book
from .input_sanitizer import sanitize_book_id
from .object_id import generate_object_id, is_valid_object_id

__all__ = ["NewBookFields", "generate_object_id", "is_valid_object_id", "sanitize_book_id", "validate_new_book"]
