from typing import List, Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from ..core.repository import JsonRepository, get_repository
from ..models import Word, WordList

router = APIRouter(prefix="/lists", tags=["lists"])


# ---------- Schemas ----------

class ListCreate(BaseModel):
    # Optional so a missing name reaches the repository and becomes a 400
    name: Optional[str] = None


class WordCreate(BaseModel):
    english: Optional[str] = None
    hebrew: Optional[str] = None


class SuccessOut(BaseModel):
    success: bool = True


# ---------- Endpoints ----------

@router.get("", response_model=List[WordList])
def list_lists(repo: JsonRepository = Depends(get_repository)):
    return repo.get_lists()


@router.post("", response_model=WordList, status_code=status.HTTP_201_CREATED)
def create_list(payload: ListCreate, repo: JsonRepository = Depends(get_repository)):
    return repo.create_list(payload.name)


@router.delete("/{list_id}", response_model=SuccessOut)
def delete_list(list_id: int, repo: JsonRepository = Depends(get_repository)):
    # Words of the list go with it
    repo.delete_list(list_id)
    return SuccessOut()


@router.get("/{list_id}/words", response_model=List[Word])
def list_words(list_id: int, repo: JsonRepository = Depends(get_repository)):
    return repo.get_words(list_id)


@router.post("/{list_id}/words", response_model=Word, status_code=status.HTTP_201_CREATED)
def create_word(list_id: int, payload: WordCreate, repo: JsonRepository = Depends(get_repository)):
    return repo.create_word(list_id, payload.english, payload.hebrew)
