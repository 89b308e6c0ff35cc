"""
FastAPI application relaying photo transformations to the Gemini image model.
"""
import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from clients import GeminiImageClient
from config import get_settings
from models import StyleDescription, TransformStyle, get_style_info
from services import RelayService
from services.relay import ModelClientFactory

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.WARNING)

TRANSFORM_PATH = "/api/transform-image"
# Registered for every method so non-POST requests get the relay's own 405 body
TRANSFORM_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def get_model_client_factory() -> ModelClientFactory:
    model = get_settings().gemini_model
    return lambda api_key: GeminiImageClient(api_key=api_key, model=model)


def get_relay_service(
    factory: ModelClientFactory = Depends(get_model_client_factory),
) -> RelayService:
    return RelayService(api_key=get_settings().api_key, model_client_factory=factory)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    logger.info("Flashback relay starting")
    s = get_settings()
    if s.api_key:
        logger.info("Gemini model: %s", s.gemini_model)
    else:
        logger.warning("API_KEY is not set; every transform request will fail")
    yield
    logger.info("Flashback relay shutting down")


app = FastAPI(
    title="Flashback – 2000s Photo Transformer",
    description="Turn photos into early-2000s throwbacks",
    version="1.0.0",
    lifespan=lifespan,
)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse({"error": str(exc.detail)}, status_code=exc.status_code, headers=exc.headers)


@app.get("/health")
async def health() -> JSONResponse:
    """Lightweight health endpoint for uptime checks."""
    return JSONResponse({"status": "ok"})


@app.get("/api/styles", response_model=list[StyleDescription])
async def list_styles() -> list[StyleDescription]:
    return [
        StyleDescription(id=s, **get_style_info(s)._asdict())
        for s in TransformStyle
    ]


@app.api_route(TRANSFORM_PATH, methods=TRANSFORM_METHODS)
async def transform_image(
    request: Request,
    relay: RelayService = Depends(get_relay_service),
) -> JSONResponse:
    body = await request.body() if request.method == "POST" else b""
    result = await relay.handle(request.method, body)
    return JSONResponse(result.payload, status_code=result.status_code)
