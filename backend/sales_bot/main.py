"""FastAPI application main file"""
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from dotenv import load_dotenv

from sales_bot.config import settings
from sales_bot.api.v1 import router as api_router
from sales_bot.api.v1.sales_bot import error_response

# Load environment variables
load_dotenv()

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="Answer questions about sales spreadsheets in a Google Drive folder.",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Malformed bodies get the same error envelope as pipeline failures"""
    logger.error("Error: invalid request body: %s", exc.errors())
    return error_response("Invalid request body")


# Include API router
app.include_router(api_router, prefix=settings.API_V1_PREFIX)


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": f"{settings.PROJECT_NAME} API",
        "version": settings.VERSION,
        "docs": "/api/docs"
    }


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "version": settings.VERSION
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
