from datetime import datetime, timezone

from fastapi import APIRouter

from app.core.config import settings

router = APIRouter(tags=["health"])

@router.get("/")
def root():
    return {
        "message": f"Welcome to Document Extraction Service {settings.app_version}",
        "version": settings.app_version,
        "endpoints": {
            "health": "/health",
            "extract_passport": "/api/extract/passport/{pageNumber}",
            "extract_aadhaar": "/api/extract/aadhaar/{pageNumber}",
            "extract_pan_card": "/api/extract/pan-card",
            "extracted_data": "/api/extracted-data",
        },
    }

@router.get("/health")
def health():
    return {
        "status": "OK",
        "message": "Server is running",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": settings.app_env,
    }
