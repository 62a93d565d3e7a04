"""
Soundproof Studio Site Assessment API Entry Point

Use this file for deployment:
  uvicorn main:app --host 0.0.0.0 --port $PORT
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.assessment import assessment_router
from app.config import API_VERSION, get_cors_origins, get_log_level, get_port

logging.basicConfig(
    level=get_log_level(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# ============================================
# App Configuration
# ============================================
app = FastAPI(
    title="Soundproof Studio Site Assessment API",
    description="Site viability check for home-studio soundproofing projects",
    version=API_VERSION,
)

# ============================================
# CORS Configuration
# ============================================
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_cors_origins(),
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)

app.include_router(assessment_router)
logger.info("Assessment router registered")


@app.get("/health")
def health():
    return {"status": "healthy"}


@app.get("/version")
def version():
    from app.rules import get_rule_table_version
    from app.verdict import ENGINE_VERSION

    return {
        "version": API_VERSION,
        "engine_version": ENGINE_VERSION,
        "rule_table_version": get_rule_table_version(),
    }


# For local development
if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="0.0.0.0", port=get_port(), reload=True)
