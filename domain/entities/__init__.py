from .catalog import Author, Book, BookDetails, BookInstance, BookInstanceStatus, Genre

__all__ = ["Author", "Book", "BookDetails", "BookInstance", "BookInstanceStatus", "Genre"]
