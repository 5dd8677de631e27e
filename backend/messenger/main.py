# messenger/main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from messenger.config import Settings, settings as default_settings
from messenger.core.errors import MessengerError, UnmatchedRoute
from messenger.core.state import AppState

from messenger.api.v1.routers import auth, contacts, messages, presence

logger = logging.getLogger("uvicorn.error")


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def _messenger_error_handler(request: Request, exc: MessengerError):
    return _error(exc.status_code, exc.message)


async def _validation_error_handler(request: Request, exc: RequestValidationError):
    # Malformed or missing JSON body: same 400 shape as the handler-level checks
    return _error(status.HTTP_400_BAD_REQUEST, "Invalid request body")


async def _http_error_handler(request: Request, exc: StarletteHTTPException):
    # Unknown path or unsupported method on a known path
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        return _error(UnmatchedRoute.status_code, UnmatchedRoute.message)
    return _error(exc.status_code, str(exc.detail))


async def _unexpected_error_handler(request: Request, exc: Exception):
    logger.exception("[error] %s %s failed", request.method, request.url.path)
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the API with its own in-memory state.

    Every call returns an independent app: users, contacts, messages and
    presence live on app.state.messenger and are lost when the process exits.
    """
    settings = settings or default_settings
    state = AppState.build(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("[startup] %s (env=%s)", settings.APP_NAME, settings.env)
        yield
        pending = state.replies.pending_count()
        if pending:
            logger.warning("[shutdown] dropping %d pending simulated replies", pending)
        await state.replies.cancel_all()

    app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)
    app.state.messenger = state

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(MessengerError, _messenger_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, _http_error_handler)
    app.add_exception_handler(Exception, _unexpected_error_handler)

    # REST
    app.include_router(auth.router, prefix=settings.api_prefix)
    app.include_router(contacts.router, prefix=settings.api_prefix)
    app.include_router(messages.router, prefix=settings.api_prefix)
    app.include_router(presence.router, prefix=settings.api_prefix)

    @app.get("/healthz")
    def healthz():
        return {"ok": True}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=default_settings.host, port=default_settings.port)
