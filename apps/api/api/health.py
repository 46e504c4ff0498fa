"""Health check endpoint."""

import structlog
from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from apps.api.database import get_db

logger = structlog.get_logger()
router = APIRouter()


@router.get("/healthz")
async def health_check(db: Session = Depends(get_db)):
    """Report whether the database answers a trivial query."""
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.warning("Health check failed", error=str(e))
        return {"status": "error", "database": "disconnected", "error": str(e)}

    return {"status": "ok", "database": "connected"}
