import pytest

from domain.exceptions import InvalidInputError, InvalidTypeError, MissingFieldError
from domain.services.field_validator import NewBookFields, contains_markup, validate_new_book


def make_body(**overrides):
    body = {
        "familyName": "Tagore",
        "firstName": "Robi",
        "genreName": "Fiction",
        "bookTitle": "Gora",
    }
    body.update(overrides)
    return body


class TestValidateNewBook:
    def test_valid_body(self):
        fields = validate_new_book(make_body())

        assert fields == NewBookFields(
            family_name="Tagore", first_name="Robi", genre_name="Fiction", book_title="Gora"
        )

    def test_optional_fields_and_trimming(self):
        fields = validate_new_book(make_body(bookTitle="  Gora ", summary=" A novel ", isbn="9780143039617"))

        assert fields.book_title == "Gora"
        assert fields.summary == "A novel"
        assert fields.isbn == "9780143039617"

    @pytest.mark.parametrize("missing", ["familyName", "firstName", "genreName", "bookTitle"])
    def test_missing_required_field(self, missing):
        body = make_body()
        del body[missing]

        with pytest.raises(MissingFieldError) as exc_info:
            validate_new_book(body)
        assert exc_info.value.field_name == missing

    @pytest.mark.parametrize("value", ["", "   ", None])
    def test_empty_required_field(self, value):
        with pytest.raises(MissingFieldError):
            validate_new_book(make_body(bookTitle=value))

    @pytest.mark.parametrize("value", [{"$ne": ""}, {"$gt": ""}, ["Tagore"], 42, True])
    def test_non_string_field_rejected(self, value):
        with pytest.raises(InvalidTypeError) as exc_info:
            validate_new_book(make_body(familyName=value))
        assert exc_info.value.field_name == "familyName"

    def test_non_string_optional_field_rejected(self):
        with pytest.raises(InvalidTypeError):
            validate_new_book(make_body(isbn=9780143039617))

    @pytest.mark.parametrize(
        "value",
        [
            "<script>alert(1)</script>",
            "<script>alert('XSS')</script>",
            "Gora<img src=x onerror=alert(1)>",
            "<b>Gora</b>",
            "<svg/onload=alert(1)",
        ],
    )
    def test_markup_rejected(self, value):
        with pytest.raises(InvalidInputError) as exc_info:
            validate_new_book(make_body(bookTitle=value))
        assert "Invalid input" in str(exc_info.value)

    def test_markup_in_optional_field_rejected(self):
        with pytest.raises(InvalidInputError):
            validate_new_book(make_body(summary="<iframe src=evil>"))

    @pytest.mark.parametrize("body", [None, [], "Gora", 1])
    def test_body_must_be_an_object(self, body):
        with pytest.raises(InvalidTypeError):
            validate_new_book(body)


class TestContainsMarkup:
    @pytest.mark.parametrize("value", ["Tom < Jerry", "3 > 2", "a <= b", "Gora"])
    def test_plain_text_allowed(self, value):
        assert not contains_markup(value)

    @pytest.mark.parametrize("value", ["<p>", "</p>", "<!-- x -->", "< script>"])
    def test_tags_detected(self, value):
        assert contains_markup(value)
