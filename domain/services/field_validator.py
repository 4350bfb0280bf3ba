"""
Validation of the book creation request body
"""

import re
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from domain.exceptions import InvalidInputError, InvalidTypeError, MissingFieldError

REQUIRED_FIELDS = ("familyName", "firstName", "genreName", "bookTitle")
OPTIONAL_FIELDS = ("summary", "isbn")

# A complete <...> tag, or a "<" that opens one (letter, "/", "!" or "?")
MARKUP_PATTERN = re.compile(r"<[^>]*>|<[A-Za-z/!?]")


@dataclass(frozen=True)
class NewBookFields:
    family_name: str
    first_name: str
    genre_name: str
    book_title: str
    summary: str = ""
    isbn: str = ""


def contains_markup(value: str) -> bool:
    return MARKUP_PATTERN.search(value) is not None


def _check_field(body: Mapping[str, Any], name: str, required: bool) -> Optional[str]:
    value = body.get(name)
    if value is None:
        if required:
            raise MissingFieldError(name)
        return None

    # Objects such as {"$ne": ""} are query operators, never data
    if not isinstance(value, str):
        raise InvalidTypeError(f"Invalid type for field {name}: expected a string", field_name=name)

    value = value.strip()
    if required and not value:
        raise MissingFieldError(name)
    if contains_markup(value):
        raise InvalidInputError(name)
    return value


def validate_new_book(body: Any) -> NewBookFields:
    """Validate a book creation body into ``NewBookFields``.

    Every field is checked before anything else happens; the first failure
    aborts the request.

    Raises:
        MissingFieldError: A required field is absent or blank
        InvalidTypeError: The body is not an object, or a field is not a string
        InvalidInputError: A field contains markup
    """
    if not isinstance(body, Mapping):
        raise InvalidTypeError("Request body must be a JSON object")

    values = {name: _check_field(body, name, required=True) for name in REQUIRED_FIELDS}
    values.update({name: _check_field(body, name, required=False) or "" for name in OPTIONAL_FIELDS})

    return NewBookFields(
        family_name=values["familyName"],
        first_name=values["firstName"],
        genre_name=values["genreName"],
        book_title=values["bookTitle"],
        summary=values["summary"],
        isbn=values["isbn"],
    )
