from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from ..core.repository import JsonRepository, get_repository
from ..models import Word
from .routes_lists import SuccessOut

router = APIRouter(prefix="/words", tags=["words"])


# ---------- Schemas ----------

class WordUpdate(BaseModel):
    english: Optional[str] = None
    hebrew: Optional[str] = None


# ---------- Endpoints ----------

@router.put("/{word_id}", response_model=Word)
def update_word(word_id: int, payload: WordUpdate, repo: JsonRepository = Depends(get_repository)):
    data = payload.model_dump(exclude_unset=True)
    return repo.update_word(
        word_id,
        english=data.get("english"),
        hebrew=data.get("hebrew"),
    )


@router.delete("/{word_id}", response_model=SuccessOut)
def delete_word(word_id: int, repo: JsonRepository = Depends(get_repository)):
    repo.delete_word(word_id)
    return SuccessOut()
