import logging
import os

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlmodel import Session

from meme_ideas.database import engine, init_db
from meme_ideas.errors import InvalidInputError, MemeApiError
from meme_ideas.logging_config import setup_logging
from meme_ideas.routes import captions, ideas, templates
from meme_ideas.services.template_service import seed_system_templates

APP_NAME = "Meme Ideas API"

logger = logging.getLogger(__name__)

app = FastAPI(title=APP_NAME)

_cors_origins = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]
_extra = os.getenv("CORS_ORIGINS", "")
if _extra:
    _cors_origins.extend(o.strip() for o in _extra.split(",") if o.strip())

app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(MemeApiError)
async def meme_api_error_handler(request: Request, exc: MemeApiError):
    return JSONResponse(status_code=exc.status_code, content={"success": False, "error": exc.to_dict()})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    error = InvalidInputError("Request validation failed.").to_dict()
    error["details"] = jsonable_encoder(exc.errors())
    return JSONResponse(status_code=InvalidInputError.status_code, content={"success": False, "error": error})


# Include routers
app.include_router(templates.router, prefix="/api", tags=["templates"])
app.include_router(ideas.router, prefix="/api", tags=["ideas"])
app.include_router(captions.router, prefix="/api", tags=["captions"])


@app.on_event("startup")
def on_startup():
    setup_logging()
    init_db()

    if os.getenv("SEED_SYSTEM_TEMPLATES", "false").lower() in ("true", "1", "yes"):
        with Session(engine) as session:
            seed_system_templates(session)

    logger.info(f"{APP_NAME} started ({len(app.routes)} routes)")


@app.get("/api/health")
def health_check():
    return {"app_name": APP_NAME, "status": "healthy"}
