import datetime
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config import settings
from database import engine, Base
from logging_config import setup_logging

# --- IMPORT ROUTERS (APIs) ---
from routers import finance
from routers.auth import NotAuthenticated

# --- IMPORT MODELS (create_all ke liye zaroori) ---
from models.students import Parent, Student
from models.fee_models import Fee

setup_logging()
logger = logging.getLogger(__name__)

# --- CREATE DATABASE TABLES ---
Base.metadata.create_all(bind=engine)

app = FastAPI(title=settings.APP_NAME)


# ==========================================
# ✅ ERROR RESPONSES
# ==========================================
@app.exception_handler(NotAuthenticated)
async def not_authenticated_handler(request: Request, exc: NotAuthenticated):
    return JSONResponse(status_code=401, content={"error": "Unauthorized"})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s", request.url.path)
    # JSON hi bhejna hai, HTML error page nahi
    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal server error",
            "message": str(exc),
            "timestamp": datetime.datetime.now(datetime.timezone.utc).isoformat(),
        },
    )


# ==========================================
# ✅ CORS MIDDLEWARE (Dashboard frontend)
# ==========================================
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- REGISTER ROUTERS ---
app.include_router(finance.router)


@app.get("/health")
def health_check():
    return {"status": "ok", "service": settings.APP_NAME}
