from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import List, Optional


class BookInstanceStatus(str, Enum):
    AVAILABLE = "Available"
    LOANED = "Loaned"
    MAINTAINED = "Maintained"
    RESERVED = "Reserved"


@dataclass
class Author:
    id: Optional[str]
    family_name: str
    first_name: str

    @property
    def name(self) -> str:
        """Display name, "<family>, <first>" when both parts are known"""
        if self.family_name and self.first_name:
            return f"{self.family_name}, {self.first_name}"
        return self.family_name or self.first_name


@dataclass
class Genre:
    id: Optional[str]
    name: str


@dataclass
class Book:
    id: Optional[str]
    title: str
    author: Optional[Author]
    genres: List[Genre] = field(default_factory=list)
    summary: str = ""
    isbn: str = ""


@dataclass
class BookInstance:
    id: Optional[str]
    book_id: str
    imprint: str
    status: BookInstanceStatus = BookInstanceStatus.AVAILABLE
    due_back: Optional[date] = None


@dataclass
class BookDetails:
    title: str
    author: Optional[str]
    copies: List[BookInstance] = field(default_factory=list)
