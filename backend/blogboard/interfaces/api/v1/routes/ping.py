from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from blogboard.application.services.health_service import get_health_status
from blogboard.infrastructure.db.session import get_db

router = APIRouter(tags=["health"])


@router.get("/ping")
def ping(db: Session = Depends(get_db)):
    return get_health_status(db=db)
