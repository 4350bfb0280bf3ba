from .book_api import router as book_router

__all__ = ["book_router"]
