from fastapi import FastAPI, Request
from mangum import Mangum
from starlette.middleware.base import BaseHTTPMiddleware
import logging

from api import routers
from api.responses import CORS_HEADERS, INTERNAL_ERROR, error_response, preflight_response
from core.config import get_settings
from core.logging_config import configure_logging

settings = get_settings()
configure_logging(settings.LOG_LEVEL)

logger = logging.getLogger(__name__)


app = FastAPI(
    title="Donation Checkout API",
    root_path=settings.API_ROOT_PATH
)


# Stamps the fixed CORS headers on every response, including 404/405
class CORSHeaderMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        response.headers.update(CORS_HEADERS)
        return response

app.add_middleware(CORSHeaderMiddleware)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.method} {request.url.path}", exc_info=exc)
    return error_response(INTERNAL_ERROR, 500)


# Preflight is answered here, independent of the checkout route
@app.options("/{full_path:path}")
async def options_handler(full_path: str):
    return preflight_response()


app.include_router(routers.router)

handler = Mangum(app)
