from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, RedirectResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from portal.core.config import settings
from portal.core.logger import configure_logging, logger
from portal.dependencies.auth import AccessRedirect
from portal.routers import admin, auth, conferences, content, pages, user
from portal.services.backend_client import envelope


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    logger.info(f"PORTAL STARTED | env={settings.ENV} | backend={settings.BACKEND_URL}")
    yield


app = FastAPI(
    title="Conference Portal",
    version="1.0.0",
    lifespan=lifespan
)


# CORS - origins from ALLOWED_ORIGINS / WEBSITE_URL in .env
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["X-Requested-With", "Content-Type", "Accept", "Authorization", "Range"],
)


@app.exception_handler(AccessRedirect)
async def access_redirect_handler(request: Request, exc: AccessRedirect):
    logger.debug(f"REDIRECT | {request.url.path} -> {exc.location}")
    return RedirectResponse(exc.location, status_code=302)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        envelope(exc.status_code, str(exc.detail), success=False),
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None)
    )


app.include_router(auth.router)
app.include_router(pages.router)
app.include_router(admin.router)
app.include_router(conferences.router)
app.include_router(user.router)
app.include_router(content.router)
