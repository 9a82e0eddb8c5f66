import os
from contextlib import asynccontextmanager

import uvicorn
from fastapi import APIRouter, FastAPI

from .errors import setup_exception_handlers
from .logging_config import request_id_middleware, setup_logging
from .routers import translate


@asynccontextmanager
async def lifespan(_: FastAPI):
    setup_logging()
    yield


app = FastAPI(
    title="WordLens API",
    version="0.1.0",
    description="Translation with word-by-word grammatical analysis",
    lifespan=lifespan,
)

api_router = APIRouter(prefix="/api")
api_router.include_router(translate.router)


@app.get("/health", include_in_schema=False)
@api_router.get("/health", tags=["health"])
def health() -> dict[str, str]:
    return {"status": "ok"}


app.middleware("http")(request_id_middleware)
setup_exception_handlers(app)
app.include_router(api_router)


def run() -> None:
    uvicorn.run(
        "wordlens.app.main:app",
        host=os.getenv("WORDLENS_HOST", "127.0.0.1"),
        port=int(os.getenv("WORDLENS_PORT", "8000")),
    )
