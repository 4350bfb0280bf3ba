"""
Sanitizer for the book id query parameter
"""

import logging
from typing import Optional

from domain.exceptions import EmptyInputError, MalformedIdError
from domain.services.object_id import OBJECT_ID_LENGTH, is_valid_object_id

logger = logging.getLogger(__name__)


def sanitize_book_id(raw_id: Optional[str]) -> str:
    """Normalize and validate a raw book id.

    The id is trimmed and lower-cased, then must match the object id format
    exactly. Anything outside ``[0-9a-f]`` (markup included) fails the format
    check, so the returned value can go straight into a store lookup.

    Args:
        raw_id: Value taken from the request, possibly ``None``

    Returns:
        The normalized book id

    Raises:
        EmptyInputError: The id is missing or blank
        MalformedIdError: The id does not match the object id format
    """
    if raw_id is None or not raw_id.strip():
        raise EmptyInputError("Book id is required")

    book_id = raw_id.strip().lower()
    if not is_valid_object_id(book_id):
        logger.debug(f"Rejected malformed book id of length {len(book_id)}")
        raise MalformedIdError(f"Book id must be {OBJECT_ID_LENGTH} hexadecimal characters")

    return book_id
