from fastapi import APIRouter, HTTPException, status
from sqlalchemy import text

from lightbnb.core.database import AsyncDBSession

router = APIRouter()


@router.get("/")
async def health_check():
    return {
        "status": "healthy",
        "service": "lightbnb-data-access",
        "version": "0.1.0"
    }


@router.get("/database")
async def database_health(session: AsyncDBSession):
    try:
        await session.execute(text("SELECT 1"))
        return {
            "status": "healthy",
            "service": "postgresql",
            "connected": True
        }
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=f"Database health check failed: {str(e)}"
        )
