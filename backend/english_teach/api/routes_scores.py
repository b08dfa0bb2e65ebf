from typing import Optional

from fastapi import APIRouter, Depends

from ..core.repository import JsonRepository, get_repository
from ..models import CamelModel, Level, Player

router = APIRouter(prefix="/scores", tags=["scores"])


class PlayerUpdate(CamelModel):
    name: Optional[str] = None
    total_score: Optional[int] = None
    games_played: Optional[int] = None
    # Accepted for compatibility; the stored level is always recomputed
    level: Optional[Level] = None


@router.get("", response_model=Player)
def get_scores(repo: JsonRepository = Depends(get_repository)):
    return repo.get_player()


@router.put("", response_model=Player)
def update_scores(payload: PlayerUpdate, repo: JsonRepository = Depends(get_repository)):
    fields = payload.model_dump(exclude_unset=True, exclude_none=True, exclude={"level"})
    return repo.update_player(**fields)


@router.post("/reset", response_model=Player)
def reset_scores(repo: JsonRepository = Depends(get_repository)):
    return repo.reset_player()
