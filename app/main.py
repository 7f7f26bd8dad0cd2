"""
Main application entry point.
"""

import logging
import os

from fastapi import FastAPI
from app.api.v1.pricing_endpoints import router as pricing_router

# Configuration from environment
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

logging.basicConfig(
    level=getattr(logging, LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

app = FastAPI(
    title="Bundle Pricing API",
    description="Prices photography and videography bundles with the best bundle discount.",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

# Include API routers
app.include_router(pricing_router, prefix="/api/v1", tags=["pricing"])

@app.get("/")
def read_root():
    """Root endpoint."""
    return {
        "message": "Welcome to the Bundle Pricing API",
        "docs": "/docs",
        "health": "/api/v1/health"
    }

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host="0.0.0.0", port=8000, reload=True)
