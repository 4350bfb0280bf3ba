import pytest

from domain.exceptions import EmptyInputError, InputRejectedError, MalformedIdError
from domain.services.input_sanitizer import sanitize_book_id
from domain.services.object_id import generate_object_id, is_valid_object_id

VALID_ID = "5f8d0d55b54764421b7156c3"


class TestSanitizeBookId:
    def test_valid_id_is_returned(self):
        assert sanitize_book_id(VALID_ID) == VALID_ID

    def test_id_is_trimmed_and_lowercased(self):
        assert sanitize_book_id("  5F8D0D55B54764421B7156C3 ") == VALID_ID

    @pytest.mark.parametrize("raw_id", [None, "", "   "])
    def test_empty_input_rejected(self, raw_id):
        with pytest.raises(EmptyInputError):
            sanitize_book_id(raw_id)

    @pytest.mark.parametrize(
        "raw_id",
        [
            "5f8d0d55b54764421b7156c",  # 23 chars
            "5f8d0d55b54764421b7156c3a",  # 25 chars
            "5f8d0d55b54764421b7156zz",  # outside hex alphabet
            "5f8d0d55b5476 421b7156c3",  # inner whitespace
            "<script>alert(1)</scrip>",  # 24 chars of markup
            "<script> document.body.innerHTML = \"<a href='https://google.com'> Gotcha </a>\"</script>",
        ],
    )
    def test_malformed_id_rejected(self, raw_id):
        with pytest.raises(MalformedIdError):
            sanitize_book_id(raw_id)

    def test_rejections_share_base_class(self):
        with pytest.raises(InputRejectedError):
            sanitize_book_id("nope")


class TestObjectId:
    def test_generated_ids_match_format(self):
        ids = {generate_object_id() for _ in range(50)}
        assert len(ids) == 50
        assert all(is_valid_object_id(i) for i in ids)

    def test_uppercase_is_not_valid_without_normalization(self):
        assert not is_valid_object_id(VALID_ID.upper())
