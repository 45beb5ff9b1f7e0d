# writing_practice/main.py
import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from writing_practice.core.errors import WritingPracticeError
from writing_practice.core.question_store import QUESTION_FILES
from writing_practice.core.settings import get_settings
from writing_practice.routers import evaluator, questions

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
)
logger = logging.getLogger(__name__)

# ==================== FastAPI App ====================
app = FastAPI(
    title="Descriptive Writing Practice",
    description="Random practice questions per category and AI-graded answers with an originality check",
    version="1.0.0",
    docs_url="/docs",
    redoc_url=None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(questions.router)
app.include_router(evaluator.router)


# ==================== Error rendering ====================
@app.exception_handler(WritingPracticeError)
async def writing_practice_error_handler(request: Request, exc: WritingPracticeError):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    logger.info(f"{request.method} {request.url.path} rejected: {exc.errors()}")
    return JSONResponse(status_code=400, content={"error": "Invalid request body"})


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})


# ==================== Routes ====================
@app.get("/")
async def root():
    return {
        "message": "Descriptive writing practice API is LIVE",
        "status": "ready",
        "docs": "/docs",
    }


@app.get("/api/health")
async def health():
    return {
        "status": "healthy",
        "categories": len(QUESTION_FILES),
        "grader_configured": bool(settings.openai_api_key),
    }


# ==================== Run Server ====================
if __name__ == "__main__":
    logger.info(f"Starting server on http://{settings.host}:{settings.port}")
    uvicorn.run("writing_practice.main:app", host=settings.host, port=settings.port, log_level="info")
