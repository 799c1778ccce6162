from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.middleware.base import BaseHTTPMiddleware
from core.config import Settings
from core.errors import UpstreamError
from pathlib import Path
import logging
import time

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "Referrer-Policy": "no-referrer",
    "X-DNS-Prefetch-Control": "off",
    "X-Download-Options": "noopen",
    "X-Permitted-Cross-Domain-Policies": "none",
    "Cross-Origin-Opener-Policy": "same-origin",
    "Cross-Origin-Resource-Policy": "same-origin",
    "Strict-Transport-Security": "max-age=15552000; includeSubDomains",
}


def configure_logging(settings: Settings):
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    handlers = []
    if settings.log_dir:
        log_dir = Path(settings.log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        error_handler = logging.FileHandler(log_dir / "error.log", encoding="utf-8")
        error_handler.setLevel(logging.ERROR)
        handlers.append(error_handler)
        handlers.append(logging.FileHandler(log_dir / "combined.log", encoding="utf-8"))
    if not handlers or not settings.is_production:
        handlers.append(logging.StreamHandler())
    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers, force=True)


def client_key(request: Request) -> str:
    return request.client.host if request.client else "unknown"


class LoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        logging.info(f"Request: {request.method} {request.url.path} from {client_key(request)}")

        response = await call_next(request)

        elapsed = (time.perf_counter() - start) * 1000
        logging.info(f"Response status: {response.status_code} ({elapsed:.1f} ms)")
        return response


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        for name, value in SECURITY_HEADERS.items():
            response.headers.setdefault(name, value)
        return response


class QuotaMiddleware(BaseHTTPMiddleware):
    """Reject /api calls once the caller's budget for the window is spent."""

    async def dispatch(self, request: Request, call_next):
        if request.url.path.startswith("/api"):
            limiter = request.app.state.quota
            if not limiter.consume(client_key(request)):
                return PlainTextResponse("Too Many Requests", status_code=429)
        return await call_next(request)


class ErrorBoundaryMiddleware(BaseHTTPMiddleware):
    """Turn unexpected failures into the generic 500 inside the middleware stack,
    so the response still carries CORS and security headers."""

    async def dispatch(self, request: Request, call_next):
        try:
            return await call_next(request)
        except Exception as e:
            logging.error(f"[ERROR] Unhandled exception on {request.url.path}: {e}", exc_info=e)
            return JSONResponse(status_code=500, content={"error": "Internal Server Error"})


def _field_name(error: dict) -> str:
    if error.get("type") == "json_invalid":
        return "body"
    parts = [str(part) for part in error.get("loc", ()) if part != "body"]
    return ".".join(parts) if parts else "body"


async def validation_error_handler(request: Request, exc: RequestValidationError):
    first = exc.errors()[0]
    field = _field_name(first)
    message = f"{field}: {first.get('msg', 'invalid value')}"
    logging.warning(f"[VALIDATION] {request.url.path} rejected, field={field}, constraint={first.get('type')}")
    return JSONResponse(status_code=400, content={"error": message})


async def upstream_error_handler(request: Request, exc: UpstreamError):
    logging.error(f"[UPSTREAM] {request.url.path} failed (model={exc.model_name or 'default'}): {exc}", exc_info=exc)
    return JSONResponse(status_code=500, content={"error": "Internal Server Error"})


async def unhandled_error_handler(request: Request, exc: Exception):
    logging.error(f"[ERROR] Unhandled exception on {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(status_code=500, content={"error": "Internal Server Error"})


def register_error_handlers(app: FastAPI):
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(UpstreamError, upstream_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
