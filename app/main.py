# main.py
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.middleware.gzip import GZipMiddleware
from api.v1 import prompts
from core.config import Settings, SERVICE_NAME, get_settings
from core.errors import ConfigError
from core.gemini import GeminiClient
from core.quota import QuotaLimiter
from schemas.rules import (
    ErrorBoundaryMiddleware,
    LoggingMiddleware,
    QuotaMiddleware,
    SecurityHeadersMiddleware,
    configure_logging,
    register_error_handlers,
)
from services.prompt_service import PromptPipeline
from services.assist_service import AssistService
from services.preset_service import PresetService
import logging
import sys


def create_app(settings: Settings = None, model_client=None, quota: QuotaLimiter = None) -> FastAPI:
    """Build the app with its process-scoped collaborators.

    The Gemini client and the quota limiter are created once here and handed
    to the request handlers through `app.state`; tests pass their own.
    """
    settings = settings or get_settings()
    configure_logging(settings)

    model_client = model_client or GeminiClient(settings.gemini_api_key, settings.generation_model)
    quota = quota or QuotaLimiter(settings.rate_limit_points, settings.rate_limit_duration)

    app = FastAPI(title="AI Prompt Creator API")
    app.state.settings = settings
    app.state.quota = quota
    app.state.pipeline = PromptPipeline(model_client)
    app.state.assist = AssistService(model_client)
    app.state.presets = PresetService(model_client)

    # Last added runs first
    app.add_middleware(ErrorBoundaryMiddleware)
    app.add_middleware(QuotaMiddleware)
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(GZipMiddleware, minimum_size=1000)
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)
    app.include_router(prompts.router)

    index_page = settings.static_dir / "index.html"

    @app.get("/", include_in_schema=False)
    def read_root():
        if index_page.exists():
            return FileResponse(str(index_page))
        return JSONResponse({"message": f"{SERVICE_NAME} is running"})

    if settings.static_dir.exists():
        app.mount("/static", StaticFiles(directory=str(settings.static_dir)), name="static")

    logging.info(f"[APP] Ready, default model={settings.generation_model}, "
                 f"quota={settings.rate_limit_points}/{settings.rate_limit_duration}s")
    return app


def run():
    import uvicorn

    try:
        settings = get_settings()
    except ConfigError as e:
        logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
        logging.critical(f"[APP] Cannot start: {e}")
        sys.exit(1)

    app = create_app(settings)
    logging.info(f"Server is running on http://localhost:{settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
