from fastapi import APIRouter, Depends
from pydantic import BaseModel

from ..config import settings
from ..core.repository import JsonRepository, get_repository

router = APIRouter(tags=["status"])


class HealthResponse(BaseModel):
    status: str
    app: str
    environment: str
    lists: int
    words: int


@router.get("/health", response_model=HealthResponse)
def health(repo: JsonRepository = Depends(get_repository)):
    return HealthResponse(
        status="ok",
        app=settings.app_name,
        environment=settings.environment,
        lists=len(repo.get_lists()),
        words=len(repo.get_words()),
    )
