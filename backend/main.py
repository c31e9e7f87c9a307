"""FilterLab Backend — FastAPI application entry point."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend import config
from backend.routes import analysis, library

logging.basicConfig(level=config.LOG_LEVEL)

app = FastAPI(
    title="FilterLab API",
    description="Analog filter analysis: transfer functions, Bode, time-domain and pole-zero data",
    version="0.1.0",
)

# CORS — allow frontend origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=[config.FRONTEND_URL] if config.FRONTEND_URL else [],
    allow_origin_regex=r"^https?://(localhost|127\.0\.0\.1)(:\d+)?$",
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register route modules
app.include_router(analysis.router, prefix="/api", tags=["Analysis"])
app.include_router(library.router, prefix="/api", tags=["Library"])


@app.get("/api/health")
async def health_check():
    return {"status": "healthy", "service": "filterlab-backend"}
