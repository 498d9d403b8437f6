import logging

# Log configuration (before other imports)
# ruff: noqa: E402
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    force=True
)

from fastapi import FastAPI, Request  # noqa: E402
from fastapi.exceptions import RequestValidationError  # noqa: E402
from fastapi.middleware.cors import CORSMiddleware  # noqa: E402
from fastapi.responses import JSONResponse  # noqa: E402

from app import config  # noqa: E402
from app.api.base import api_router  # noqa: E402
from app.exceptions import AppError, ValidationFailedError, status_code_for  # noqa: E402

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Dashboard Starter API",
    description="Task and analytics API for the admin dashboard starter",
    version="1.0.0"
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include all API routes
app.include_router(api_router)


@app.exception_handler(ValidationFailedError)
async def handle_validation_failed(request: Request, exc: ValidationFailedError):
    return JSONResponse(status_code=status_code_for(exc), content={"errors": exc.errors})


@app.exception_handler(RequestValidationError)
async def handle_request_validation(request: Request, exc: RequestValidationError):
    errors = []
    for error in exc.errors():
        loc = error.get("loc", ())
        if len(loc) > 1 and loc[0] in ("body", "path", "query"):
            errors.append({str(loc[-1]): error.get("msg", "Invalid value")})
        else:
            errors.append({"general": error.get("msg", "Invalid request")})
    return JSONResponse(status_code=422, content={"errors": errors})


@app.exception_handler(AppError)
async def handle_app_error(request: Request, exc: AppError):
    status_code = status_code_for(exc)
    if status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message} ({exc.error})")
    return JSONResponse(status_code=status_code, content=exc.to_body())


@app.exception_handler(Exception)
async def handle_unexpected_error(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=500,
        content={"message": "Internal server error", "error": str(exc)},
    )


@app.get("/health")
def health():
    return {"status": "UP"}


@app.get("/")
def read_root():
    return {
        "message": "Dashboard Starter API",
        "docs": "/docs",
        "version": "1.0.0"
    }


def run():
    import uvicorn

    logger.info(f"Backend server running at http://localhost:{config.BACKEND_PORT}")
    uvicorn.run("app.main:app", host="0.0.0.0", port=config.BACKEND_PORT)


if __name__ == "__main__":
    run()
