import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api.routes_backup import router as backup_router
from .api.routes_lists import router as lists_router
from .api.routes_scores import router as scores_router
from .api.routes_status import router as status_router
from .api.routes_translate import router as translate_router
from .api.routes_words import router as words_router
from .config import settings
from .core.errors import BackendUnavailable, NotFound, ValidationError
from .core.repository import get_repository
from .core.seed import seed_initial_data

logger = logging.getLogger(__name__)


app = FastAPI(
    title=settings.app_name,
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["Content-Type"],
)


@app.on_event("startup")
async def startup_event():
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    # Seed if empty
    seed_initial_data(get_repository())
    logger.info("serving data from %s", settings.data_dir.resolve())


# ---------- Error mapping ----------

@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    return JSONResponse(status_code=400, content={"error": str(exc)})


@app.exception_handler(NotFound)
async def not_found_handler(request: Request, exc: NotFound):
    return JSONResponse(status_code=404, content={"error": str(exc)})


@app.exception_handler(BackendUnavailable)
async def storage_error_handler(request: Request, exc: BackendUnavailable):
    return JSONResponse(status_code=503, content={"error": str(exc)})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    first = errors[0] if errors else {}
    field = ".".join(str(part) for part in first.get("loc", ())[1:]) or "body"
    return JSONResponse(
        status_code=400,
        content={"error": f"{field}: {first.get('msg', 'invalid request')}"},
    )


app.include_router(status_router, prefix="/api")
app.include_router(lists_router, prefix="/api")
app.include_router(words_router, prefix="/api")
app.include_router(scores_router, prefix="/api")
app.include_router(translate_router, prefix="/api")
app.include_router(backup_router, prefix="/api")
