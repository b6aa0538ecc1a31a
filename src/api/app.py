from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from slowapi.errors import RateLimitExceeded
from .error import ClientError, ServerError
from .rate_limiter import limiter
import logging

logger = logging.getLogger(__name__)


async def handle_client_error(request: Request, exc: ClientError):
    body = exc.to_body()
    logger.warning(f"Client error: {body['error']}")
    return JSONResponse(status_code=exc.status_code, content=body)


async def handle_server_error(request: Request, exc: ServerError):
    logger.error(f"Server error: {exc.base_error.code} ({exc.base_error.message})")
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


async def handle_rate_limit_exceeded(request: Request, exc: RateLimitExceeded):
    error_dict = {"code": "RATE_LIMITED", "message": f"Rate limit exceeded: {exc.detail}"}
    logger.warning(f"Rate limit exceeded for {request.url.path}")
    return JSONResponse(status_code=status.HTTP_429_TOO_MANY_REQUESTS, content={"error": error_dict})


def create_app(ApplicationConfig) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        sweeper = None
        if ApplicationConfig.PASSWORD_RESET_SWEEP_ENABLED:
            from src.adapter.services.reset_token_sweeper import ResetTokenSweeper
            from src.depends import AsyncSessionLocal

            sweeper = ResetTokenSweeper(
                AsyncSessionLocal, ApplicationConfig.PASSWORD_RESET_SWEEP_INTERVAL_SECONDS
            )
            sweeper.start()
        yield
        if sweeper is not None:
            await sweeper.stop()

    app = FastAPI(title="Nairobi Verified Auth API", version="0.1.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from src.api.routes import admin, auth, health_check

    app.include_router(health_check.router, tags=["Health"])
    app.include_router(auth.router, tags=["Authentication"])
    app.include_router(admin.router, tags=["Admin"])

    app.state.limiter = limiter
    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)
    app.add_exception_handler(RateLimitExceeded, handle_rate_limit_exceeded)

    return app
