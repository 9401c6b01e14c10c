import logging
import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from extrema.api import health, stats
from extrema.config import get_settings
from extrema.observability.metrics import MetricsMiddleware, metrics_router
from extrema.observability.logging import setup_logging
from contextlib import asynccontextmanager

logger = logging.getLogger(__name__)

# READY_FLAG is True between lifespan startup and shutdown; /ready reports it
READY_FLAG = False

# Lifespan handler for FastAPI: flips READY_FLAG around the serving window
@asynccontextmanager
async def app_lifespan(app: FastAPI):
    global READY_FLAG
    # The engine is stateless, so there is nothing to warm up before serving
    READY_FLAG = True  # Mark app as ready
    logger.info("Extrema service ready")
    yield
    READY_FLAG = False  # Mark app as not ready during shutdown

# Factory function to create the FastAPI app
def create_app() -> FastAPI:
    settings = get_settings()  # EXTREMA_* environment, read once per process
    setup_logging(settings.log_level)  # Set up logging before anything logs
    app = FastAPI(
        title="Extrema Service",
        version="1.0.0",
        lifespan=app_lifespan,  # Use custom lifespan for readiness
    )
    app.add_middleware(MetricsMiddleware)  # Add Prometheus metrics middleware
    app.include_router(metrics_router)     # Expose /metrics endpoint
    app.include_router(health.router)      # Expose /health and /ready endpoints
    app.include_router(stats.router)       # Expose /max, /min, /bounds, /maxk, /mink
    # Expose a callable to check readiness from endpoints
    app.state.ready_flag = lambda: READY_FLAG

    # Malformed bodies are client errors: always 400, never 422
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        # Validator errors carry the raised exception in "ctx", which is not JSON
        def serialize_error(err):
            if isinstance(err, Exception):
                return str(err)
            if isinstance(err, dict):
                return {k: serialize_error(v) for k, v in err.items()}
            if isinstance(err, list):
                return [serialize_error(e) for e in err]
            return err
        return JSONResponse(
            status_code=400,
            content={"detail": serialize_error(exc.errors())},
        )

    return app

# Create the FastAPI app instance (uvicorn extrema.main:app)
app = create_app()

def main() -> None:
    """Run the service with uvicorn (console script ``extrema-serve``)."""
    settings = get_settings()
    logger.info("Starting Extrema service on %s:%d", settings.host, settings.port)
    # log_config=None keeps the handlers installed by setup_logging
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)

if __name__ == "__main__":
    main()
