from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.errors import install_error_handlers
from .api.routes import awards, health, meetings
from .core.config import get_settings
from .core.logging import configure_logging

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    configure_logging(settings.log_level)
    yield


app = FastAPI(title=settings.app_name, version=settings.version, lifespan=lifespan)

# Allow the form front end (local dev and docker hostnames)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

install_error_handlers(app)
app.include_router(health.router)
app.include_router(meetings.router)
app.include_router(awards.router)


@app.get("/", summary="Root")
async def root() -> dict[str, str]:
    return {
        "app": settings.app_name,
        "version": settings.version,
        "period": f"{settings.club_start_date:%Y.%m.%d} - {settings.reference_date:%Y.%m.%d}",
    }


if __name__ == "__main__":  # pragma: no cover
    import uvicorn

    uvicorn.run("bookclub.main:app", host="127.0.0.1", port=8000, reload=True)
