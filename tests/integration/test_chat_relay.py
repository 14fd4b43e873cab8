"""Integration tests for the POST /chat relay.

Uses the real FastAPI app over ASGITransport. Only the Gemini endpoint is
replaced, with httpx.MockTransport.
"""

import json
from collections.abc import Callable

import httpx
import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from pdfchat.api import chat
from pdfchat.chat.controller import NO_RESPONSE_TEXT, ChatController
from pdfchat.llm.config import GeminiConfig
from pdfchat.llm.gemini_client import GeminiClient
from pdfchat.models.schemas import CompletionResponse
from pdfchat.ui.relay import RelayClient

Handler = Callable[[httpx.Request], httpx.Response]

BODY = {"contents": [{"role": "user", "parts": [{"text": "Say hello"}]}]}


class Upstream:
    """Fake Gemini endpoint recording what the relay forwarded."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.response = httpx.Response(
            200, json={"candidates": [{"content": {"parts": [{"text": "hello!"}]}}]}
        )

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.response


@pytest.fixture
def upstream(api_app: FastAPI) -> Upstream:
    fake = Upstream()
    client = GeminiClient(
        GeminiConfig(api_key="server-side-key"), transport=httpx.MockTransport(fake)
    )
    api_app.dependency_overrides[chat.get_client] = lambda: client
    return fake


class TestChatRelay:
    """Integration tests for POST /chat."""

    async def test_returns_completion(self, async_client: AsyncClient, upstream: Upstream) -> None:
        response = await async_client.post("/chat", json=BODY)

        assert response.status_code == 200
        assert CompletionResponse.model_validate(response.json()).text == "hello!"

    async def test_forwards_history_with_server_key(
        self, async_client: AsyncClient, upstream: Upstream
    ) -> None:
        await async_client.post("/chat", json=BODY)

        forwarded = upstream.requests[0]
        assert forwarded.headers["x-goog-api-key"] == "server-side-key"
        assert json.loads(forwarded.content) == BODY

    async def test_missing_candidates_returns_null_text(
        self, async_client: AsyncClient, upstream: Upstream
    ) -> None:
        upstream.response = httpx.Response(200, json={"promptFeedback": {}})

        response = await async_client.post("/chat", json=BODY)

        assert response.status_code == 200
        assert response.json() == {"text": None}

    async def test_upstream_error_becomes_502(
        self, async_client: AsyncClient, upstream: Upstream
    ) -> None:
        upstream.response = httpx.Response(
            400, json={"error": {"code": 400, "message": "API key not valid"}}
        )

        response = await async_client.post("/chat", json=BODY)

        assert response.status_code == 502
        assert response.json() == {"error": {"message": "API key not valid"}}

    @pytest.mark.parametrize(
        "body",
        [
            {},
            {"contents": []},
            {"contents": [{"role": "assistant", "parts": [{"text": "x"}]}]},
            {"contents": [{"role": "user", "parts": []}]},
        ],
    )
    async def test_invalid_body_returns_422(
        self, async_client: AsyncClient, upstream: Upstream, body: dict
    ) -> None:
        response = await async_client.post("/chat", json=body)

        assert response.status_code == 422
        assert upstream.requests == []

    async def test_wrong_http_method_returns_405(self, async_client: AsyncClient) -> None:
        response = await async_client.get("/chat")

        assert response.status_code == 405

    async def test_missing_api_key_returns_503(
        self, async_client: AsyncClient, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        def unconfigured() -> GeminiClient:
            raise ValueError("GEMINI_API_KEY is required")

        monkeypatch.setattr(chat, "get_gemini_client", unconfigured)

        response = await async_client.post("/chat", json=BODY)

        assert response.status_code == 503
        assert "not configured" in response.json()["detail"]

    async def test_health(self, async_client: AsyncClient) -> None:
        response = await async_client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestPageToRelayFlow:
    """ChatController -> RelayClient -> FastAPI relay -> fake Gemini."""

    @pytest.fixture
    def controller(self, api_app: FastAPI, upstream: Upstream) -> ChatController:
        relay = RelayClient(base_url="http://test", transport=ASGITransport(app=api_app))
        return ChatController(relay.complete)

    async def test_reply_is_appended(self, controller: ChatController) -> None:
        controller.store.input_text = "Say hello"

        await controller.send()

        assert [m.content for m in controller.store.messages] == ["Say hello", "hello!"]

    async def test_missing_text_shows_placeholder(
        self, controller: ChatController, upstream: Upstream
    ) -> None:
        upstream.response = httpx.Response(200, json={"candidates": []})
        controller.store.input_text = "Say hello"

        await controller.send()

        assert controller.store.messages[-1].content == NO_RESPONSE_TEXT

    async def test_upstream_error_message_reaches_the_chat(
        self, controller: ChatController, upstream: Upstream
    ) -> None:
        upstream.response = httpx.Response(403, json={"error": {"message": "M"}})
        controller.store.input_text = "Say hello"

        await controller.send()

        reply = controller.store.messages[-1].content
        assert reply == "⚠️ API Error: API request failed: M"
