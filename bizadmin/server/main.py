import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from bizadmin.server.api import clients, exports, invoices, quotations, reports, system
from bizadmin.server.db.session import init_store
from bizadmin.server.logging_setup import configure_logging
from bizadmin.server.settings.config import settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    store = init_store()
    logger.info("Starting %s (%s), database at %s", settings.app_name, settings.environment, store.path)
    yield
    logger.info("Shutting down")


app = FastAPI(title=settings.app_name, debug=settings.debug, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials="*" not in settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ==============================
# ERROR BODIES: {"message": ...}
# ==============================

@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    if request.url.path.startswith("/api/reports"):
        message = "Missing required report configuration fields"
    else:
        message = "Missing required fields"
    logger.info("Rejected %s %s: %s", request.method, request.url.path, message)
    # the rejected input is not echoed back; it may hold values JSON cannot encode
    return JSONResponse(
        status_code=400,
        content={
            "message": message,
            "errors": jsonable_encoder(
                [{"loc": e.get("loc"), "msg": e.get("msg"), "type": e.get("type")} for e in exc.errors()]
            ),
        },
    )


# Routers
app.include_router(system.router)           # /health, /__debug/routes
app.include_router(quotations.router)       # /api/quotations...
app.include_router(clients.router)          # /api/clients...
app.include_router(invoices.router)         # /api/invoices...
app.include_router(reports.router)          # /api/reports...
app.include_router(exports.router)          # /api/{collection}/export.csv

# The front end (HTML/JS/CSS) is served from the root; must be mounted last
if settings.static_dir and os.path.isdir(settings.static_dir):
    app.mount("/", StaticFiles(directory=settings.static_dir, html=True), name="static")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.host, port=settings.port)
