import asyncio

import allure
import httpx
import pytest

from english_teach.core.translation import (
    FAILED_MESSAGE,
    NOT_FOUND_MESSAGE,
    translate_to_hebrew,
)

pytestmark = pytest.mark.unit


def run_translation(handler, word="apple"):
    async def go():
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            return await translate_to_hebrew(word, client=client)

    return asyncio.run(go())


@allure.feature("Translation")
class TestTranslateToHebrew:

    def test_success(self):
        seen = {}

        def handler(request):
            seen["params"] = dict(request.url.params)
            return httpx.Response(
                200,
                json={"responseStatus": 200, "responseData": {"translatedText": " תפוח "}},
            )

        result = run_translation(handler)
        assert result.success is True
        assert result.translation == "תפוח"
        assert result.error is None
        assert seen["params"] == {"q": "apple", "langpair": "en|he"}

    def test_no_translation_found(self):
        result = run_translation(
            lambda request: httpx.Response(200, json={"responseStatus": 403, "responseData": {}})
        )
        assert result.success is False
        assert result.translation == ""
        assert result.error == NOT_FOUND_MESSAGE

    def test_http_error(self):
        result = run_translation(lambda request: httpx.Response(503))
        assert result.success is False
        assert result.error == FAILED_MESSAGE

    def test_network_error(self):
        def handler(request):
            raise httpx.ConnectTimeout("timed out", request=request)

        result = run_translation(handler)
        assert result.success is False
        assert result.translation == ""
        assert result.error == FAILED_MESSAGE

    def test_garbage_body(self):
        result = run_translation(lambda request: httpx.Response(200, content=b"<html>"))
        assert result.error == FAILED_MESSAGE
