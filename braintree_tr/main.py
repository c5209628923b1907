"""
Braintree Transparent Redirect - Demo Merchant Server

FastAPI application exposing the merchant side of the transparent redirect flow.
"""
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
import logging

from .config import settings
from .exceptions import BraintreeError
from .api.transparent_redirect import router as transparent_redirect_router


# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


# Initialize FastAPI application
app = FastAPI(
    title="Braintree Transparent Redirect",
    description="Merchant-side transparent redirect descriptors and callback validation",
    version="0.1.0",
)


@app.exception_handler(BraintreeError)
async def braintree_error_handler(request: Request, exc: BraintreeError):
    """
    Handle transparent redirect errors with standardized response format.

    Returns 400 Bad Request with error details from BraintreeError.to_dict().
    """
    logger.warning(
        f"Braintree error: {exc.error_code} - {exc.message}",
        extra={"details": exc.details}
    )

    return JSONResponse(
        status_code=400,
        content=exc.to_dict(),
    )


@app.exception_handler(ValueError)
async def value_error_handler(request: Request, exc: ValueError):
    """
    Handle validation errors with user-friendly messages.

    Used for input validation failures not caught by Pydantic.
    """
    logger.warning(f"Validation error: {str(exc)}")

    return JSONResponse(
        status_code=400,
        content={
            "error_code": "validation_error",
            "message": str(exc),
            "details": {}
        },
    )


# Health check endpoint
@app.get("/api/health")
async def health_check():
    """
    Health check endpoint for monitoring and load balancers.

    Returns:
        Server status and gateway environment
    """
    return {
        "status": "healthy",
        "version": "0.1.0",
        "environment": settings.braintree_environment,
    }


# Include API routers
app.include_router(transparent_redirect_router, prefix="/api/transparent-redirect", tags=["Transparent Redirect"])


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "braintree_tr.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower()
    )
