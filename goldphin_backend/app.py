from __future__ import annotations
import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from goldphin_backend import APP_NAME, APP_VERSION
from goldphin_backend.dispatch import INTERNAL_ERROR, handle
from goldphin_backend.providers.registry import ProviderRegistry
from goldphin_backend.schemas import ChatRequest, ChatResponse, Health, ServiceInfo
from goldphin_backend.settings import configure_logging, get_settings, load_env_file
from goldphin_backend.transport import HttpxSender

logger = logging.getLogger(__name__)

BAD_BODY = "Request body must be a JSON object"
TOO_LARGE = "Request body too large"

load_env_file()
_settings = get_settings()
configure_logging(_settings["LOG_LEVEL"])


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("%s ready on port %s", APP_NAME, get_settings()["PORT"])
    logger.info("Supported providers: %s", ", ".join(app.state.providers.names))
    yield


app = FastAPI(title=APP_NAME, version=APP_VERSION, lifespan=lifespan)


@app.middleware("http")
async def limit_body_size(request: Request, call_next):
    limit = app.state.max_body_bytes
    declared = request.headers.get("content-length")
    if declared is not None and declared.isdigit():
        too_large = int(declared) > limit
    elif request.method in ("POST", "PUT", "PATCH"):
        # no length header (chunked), measure what was sent
        too_large = len(await request.body()) > limit
    else:
        too_large = False
    if too_large:
        return JSONResponse(status_code=413, content={"success": False, "error": TOO_LARGE})
    return await call_next(request)


# outermost, so 413 responses also carry CORS headers
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.state.sender = HttpxSender(timeout=_settings["HTTP_TIMEOUT"])
app.state.providers = ProviderRegistry()
app.state.max_body_bytes = _settings["MAX_BODY_BYTES"]


def _utcnow() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@app.exception_handler(RequestValidationError)
async def bad_body(request: Request, exc: RequestValidationError):
    return JSONResponse(status_code=400, content={"success": False, "error": BAD_BODY})


@app.exception_handler(Exception)
async def server_error(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s", request.url.path)
    return JSONResponse(status_code=500, content={"success": False, "error": str(exc) or INTERNAL_ERROR})


@app.post("/api/chat", response_model=ChatResponse, response_model_exclude_none=True)
async def chat(body: ChatRequest):
    result = await handle(body, app.state.sender, app.state.providers)
    return JSONResponse(status_code=result.status_code, content=result.to_payload())


@app.get("/health", response_model=Health)
async def health():
    return Health(status="ok", message=f"{APP_NAME} is running!", timestamp=_utcnow())


@app.get("/", response_model=ServiceInfo)
async def root():
    return ServiceInfo(
        message=f"{APP_NAME} Server",
        version=APP_VERSION,
        endpoints={"chat": "POST /api/chat", "health": "GET /health"},
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("goldphin_backend.app:app", host=_settings["HOST"], port=_settings["PORT"])
