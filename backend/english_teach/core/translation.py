from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Optional

import httpx

from ..config import settings
from .errors import TranslationFailure

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "לא נמצא תרגום"
FAILED_MESSAGE = "שגיאה בתרגום - נא להזין תרגום ידנית"


@dataclass
class TranslationResult:
    success: bool
    translation: str
    error: Optional[str] = None

    def to_dict(self) -> dict:
        return asdict(self)


async def fetch_translation(
    english: str,
    client: httpx.AsyncClient,
    api_url: str = settings.translation_api_url,
) -> Optional[str]:
    """
    Ask MyMemory for an en->he translation.
    Returns None when the service answers without a usable translation,
    raises TranslationFailure when the request itself fails.
    """
    try:
        r = await client.get(api_url, params={"q": english, "langpair": "en|he"})
        r.raise_for_status()
        data = r.json()
    except (httpx.HTTPError, ValueError) as exc:
        raise TranslationFailure(f"{type(exc).__name__}: {exc}") from exc

    if not isinstance(data, dict):
        return None
    translated = (data.get("responseData") or {}).get("translatedText")
    if data.get("responseStatus") == 200 and translated:
        return translated.strip()
    return None


async def translate_to_hebrew(
    english: str,
    client: Optional[httpx.AsyncClient] = None,
) -> TranslationResult:
    """Best-effort lookup; a failure leaves the translation blank for manual entry."""
    try:
        if client is not None:
            translated = await fetch_translation(english, client)
        else:
            async with httpx.AsyncClient(timeout=settings.translation_timeout_sec) as own_client:
                translated = await fetch_translation(english, own_client)
    except TranslationFailure as exc:
        logger.warning("translation of %r failed: %s", english, exc)
        return TranslationResult(success=False, translation="", error=FAILED_MESSAGE)

    if not translated:
        return TranslationResult(success=False, translation="", error=NOT_FOUND_MESSAGE)
    return TranslationResult(success=True, translation=translated)
