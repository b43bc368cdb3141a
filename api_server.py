"""
Fulani Hair Finder API Server
Hair loss quiz scoring, recommendations and submission storage.
Version 1.0.0
"""

import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hairfinder import __version__ as API_VERSION
from hairfinder.brain import BRAIN_VERSION
from hairfinder.brain.endpoints import brain_router, quiz_router
from hairfinder.results.models import HealthResponse
from hairfinder.results.router import router as quiz_results_router

# ============================================
# Logging
# ============================================
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
)
logger = logging.getLogger(__name__)

SERVICE_NAME = "hair-finder-api"

# ============================================
# App Configuration
# ============================================
app = FastAPI(
    title="Fulani Hair Finder API",
    description="Hair loss quiz diagnosis, bundle selection and treatment plans",
    version=API_VERSION,
)

# ============================================
# CORS Configuration
# ============================================
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "*").split(",")
    if origin.strip()
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PATCH", "OPTIONS"],
    allow_headers=["*"],
)

# ============================================
# Routers
# ============================================
app.include_router(quiz_router)
app.include_router(brain_router)
app.include_router(quiz_results_router)


@app.get("/")
def root():
    return {
        "service": "Fulani Hair Finder API",
        "version": API_VERSION,
        "status": "operational",
        "brain_version": BRAIN_VERSION,
    }


@app.get("/health", response_model=HealthResponse)
def health():
    return HealthResponse(status="ok", service=SERVICE_NAME)


@app.get("/version")
def version():
    return {
        "api_version": API_VERSION,
        "brain_version": BRAIN_VERSION,
        "strategies": ["rule_based", "style_risk"],
    }


logger.info(f"Fulani Hair Finder API {API_VERSION} ready (CORS origins: {CORS_ORIGINS})")
