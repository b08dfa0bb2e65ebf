from typing import Optional

from fastapi import APIRouter, Query
from pydantic import BaseModel

from ..core.errors import ValidationError
from ..core.translation import translate_to_hebrew

router = APIRouter(tags=["translate"])


class TranslationOut(BaseModel):
    success: bool
    translation: str
    error: Optional[str] = None


@router.get("/translate", response_model=TranslationOut)
async def translate(q: str = Query(..., min_length=1, max_length=100)):
    word = q.strip()
    if not word:
        raise ValidationError("Word is required")
    result = await translate_to_hebrew(word)
    return TranslationOut(**result.to_dict())
