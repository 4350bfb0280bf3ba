"""
Opaque record identifiers: 24 lowercase hex characters (12 random bytes).
"""

import re
import secrets

OBJECT_ID_LENGTH = 24
OBJECT_ID_PATTERN = re.compile(r"[0-9a-f]{24}")


def is_valid_object_id(value: str) -> bool:
    return bool(OBJECT_ID_PATTERN.fullmatch(value))


def generate_object_id() -> str:
    return secrets.token_hex(OBJECT_ID_LENGTH // 2)
