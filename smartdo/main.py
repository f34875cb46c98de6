import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.routing import Mount

from smartdo.config import get_settings
from smartdo.exceptions import TaskNotFoundError, UpstreamError, ValidationError
from smartdo.logging_config import configure_logging
from smartdo.mcp_server import mcp
from smartdo.models.common import ErrorResponse
from smartdo.routers.suggestions import router as suggestions_router
from smartdo.routers.tasks import router as tasks_router


# --- Localhost-only middleware ---

class LocalhostOnlyMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        client_host = request.client.host if request.client else None
        if client_host not in ("127.0.0.1", "::1", "localhost"):
            return JSONResponse(
                status_code=403,
                content={"error_code": "forbidden", "message": "Localhost access only"},
            )
        return await call_next(request)


# --- FastAPI app ---

api = FastAPI(title="SmartDo", version="0.1.0")
api.include_router(tasks_router)
api.include_router(suggestions_router)


@api.get("/api/status")
def api_status() -> dict:
    settings = get_settings()
    return {
        "gemini": {
            "model": settings.gemini_model,
            "ready": bool(settings.gemini_api_key),
        },
        "task_store": settings.task_store_file or "memory",
    }


# --- Exception handlers ---

@api.exception_handler(TaskNotFoundError)
async def not_found_handler(request: Request, exc: TaskNotFoundError):
    return JSONResponse(status_code=404, content=ErrorResponse(error_code="not_found", message=str(exc)).model_dump())


@api.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    return JSONResponse(status_code=422, content=ErrorResponse(error_code="validation_error", message=str(exc)).model_dump())


@api.exception_handler(UpstreamError)
async def upstream_error_handler(request: Request, exc: UpstreamError):
    return JSONResponse(status_code=502, content=ErrorResponse(error_code="upstream_error", message=str(exc)).model_dump())


# --- Starlette root app ---

mcp_app = mcp.http_app(path="/", stateless_http=True)

app = Starlette(
    middleware=[Middleware(LocalhostOnlyMiddleware)],
    routes=[
        Mount("/mcp", app=mcp_app),
        Mount("/", app=api),
    ],
    lifespan=mcp_app.lifespan,
)


def run():
    configure_logging()
    settings = get_settings()
    uvicorn.run(
        "smartdo.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
