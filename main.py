import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Loads .env at import time
from config.settings import settings
from domain.repositories import CatalogRepository
from infrastructure.database import close_catalog_repository, get_catalog_repository
from presentation.api import book_router

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    await close_catalog_repository()


app = FastAPI(title="Library Catalog API", version="1.0.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.frontend_url],
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

app.include_router(book_router)


@app.get("/")
async def root():
    return {"message": "Library Catalog API"}


@app.get("/health")
async def health_check(repo: CatalogRepository = Depends(get_catalog_repository)):
    # Check if the catalog store can be reached
    try:
        if await repo.verify_connectivity():
            return {"status": "healthy", "database": "connected"}
        return {"status": "unhealthy", "database": "unreachable"}
    except Exception as e:
        logger.error(f"Health check failed: {e}")
        return {"status": "unhealthy", "error": "health check failed"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
