"""
Health and service metadata endpoints
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from sqlalchemy import text
from datetime import datetime

from bookstore.database import get_db
from bookstore.config import settings

router = APIRouter(tags=["health"])


@router.get("/health")
def health_check(db: Session = Depends(get_db)):
    """
    Health check endpoint

    Runs a trivial query to confirm the database answers.
    """
    database = {"dialect": db.get_bind().dialect.name}
    try:
        db.execute(text("SELECT 1"))
        database["status"] = "healthy"
    except Exception as e:
        database["status"] = f"unhealthy: {str(e)}"

    return {
        "service": settings.SERVICE_NAME,
        "status": "healthy" if database["status"] == "healthy" else "unhealthy",
        "database": database,
        "timestamp": datetime.utcnow().isoformat()
    }


@router.get("/")
def root():
    """Root endpoint"""
    return {
        "service": settings.SERVICE_NAME,
        "version": "1.0.0",
        "resources": ["/api/books", "/api/customers", "/api/orders"],
        "docs": "/docs"
    }
