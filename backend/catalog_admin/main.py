# catalog_admin/main.py
import time
import logging
import uuid
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from catalog_admin.routers.auth import router as auth_router
from catalog_admin.routers.users import router as users_router
from catalog_admin.routers.exercises import router as exercises_router
from catalog_admin.routers import exercise_links, lookups, muscles
from catalog_admin.settings import get_settings
from catalog_admin import db as database  # for healthz DB check

log = logging.getLogger("uvicorn")
settings = get_settings()

app = FastAPI(
    title="Training Catalog Admin API",
    openapi_tags=[
        {"name": "auth", "description": "Registration & login"},
        {"name": "users", "description": "Admin accounts and roles"},
        {"name": "lookups", "description": "Planes, lateralities, levels, types, equipment, patterns"},
        {"name": "capabilities", "description": "Physical capabilities, subcapabilities, training methods"},
        {"name": "muscles", "description": "Muscle groups, subgroups and muscles"},
        {"name": "exercises", "description": "Exercise catalog"},
        {"name": "exercise links", "description": "Exercise muscle / pattern / subgroup associations"},
    ],
)

# CORS (relax for local dev; tighten origins in prod via env)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOW_ORIGINS.split(","),
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.middleware("http")
async def add_request_id_and_log(request: Request, call_next):
    req_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    start = time.perf_counter()
    response = await call_next(request)
    duration_ms = (time.perf_counter() - start) * 1000
    response.headers["X-Request-ID"] = req_id
    log.info("rid=%s %s %s -> %s in %.1fms",
             req_id, request.method, request.url.path, response.status_code, duration_ms)
    return response

@app.exception_handler(SQLAlchemyError)
async def store_unavailable(request: Request, exc: SQLAlchemyError):
    log.exception("store error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=503, content={"detail": "store unavailable"})

@app.get("/")
def root():
    return {"ok": True, "name": "Training Catalog Admin API"}

@app.get("/ping")
def ping():
    return {"pong": True}

@app.get("/healthz")
def healthz():
    # Quick DB sanity check
    try:
        with database.SessionLocal() as db:
            db.execute(text("SELECT 1"))
        return {"status": "ok"}
    except SQLAlchemyError as e:
        return {"status": "degraded", "error": str(e)}

@app.get("/version")
def version():
    return {"version": settings.API_VERSION}

# Routers
app.include_router(auth_router)
app.include_router(users_router)
for r in lookups.routers + muscles.routers:
    app.include_router(r)
app.include_router(exercises_router)
for r in exercise_links.routers:
    app.include_router(r)
