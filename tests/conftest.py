"""Shared test fixtures for PolyglotForge."""

from __future__ import annotations

import json
from dataclasses import dataclass

import httpx
import pytest

from polyglotforge.config.models import PolyglotForgeConfig
from polyglotforge.converter import BatchConverter, FileConverter, InputFile
from polyglotforge.llm.models import LLMConfig
from polyglotforge.llm.openai_adapter import OpenAIProvider
from polyglotforge.llm.structured import StructuredGenerator


@dataclass(frozen=True)
class HttpError:
    """Scripted HTTP error reply."""

    status: int
    message: str


def chat_completion(text: str, model: str) -> dict:
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "created": 0,
        "model": model,
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": text},
                "finish_reason": "stop",
                "logprobs": None,
            }
        ],
        "usage": {"prompt_tokens": 10, "completion_tokens": 20, "total_tokens": 30},
    }


class FakeProvider(OpenAIProvider):
    """OpenAI provider wired to an in-memory transport that replays a script.

    Each script item is either a string (returned as the assistant reply),
    an HttpError (returned as that status), or a callable taking the user
    prompt and returning one of those. When the script runs out the last
    item repeats. Every HTTP request is recorded in `calls`, so the real
    SDK, instructor and retry policy are all exercised.
    """

    name = "fake"

    def __init__(self, script=None, events: list | None = None) -> None:
        self.script = list(script or [])
        self.calls: list[dict] = []
        self.events = events if events is not None else []
        super().__init__(
            LLMConfig(provider="openai", model="fake-model", api_key="test-key"),
            http_client=httpx.AsyncClient(transport=httpx.MockTransport(self._handle)),
        )

    async def _handle(self, request: httpx.Request) -> httpx.Response:
        body = json.loads(await request.aread())
        messages = body["messages"]
        user = next(m["content"] for m in messages if m["role"] == "user")
        self.calls.append(
            {
                "user": user,
                "model": body["model"],
                "messages": messages,
                "response_format": body.get("response_format"),
            }
        )
        self.events.append(("generate", user))

        item = self.script[min(len(self.calls), len(self.script)) - 1] if self.script else "{}"
        if callable(item):
            item = item(user)
        if isinstance(item, HttpError):
            return httpx.Response(
                item.status, json={"error": {"message": item.message, "type": "error"}}
            )
        return httpx.Response(200, json=chat_completion(item, body["model"]))


def reply(path: str, content: str) -> str:
    return json.dumps({"path": path, "content": content})


def echo_path(user: str) -> str:
    """Reply with a converted file named after the prompt's File Path line."""
    for line in user.splitlines():
        if line.startswith("File Path: "):
            path = line[len("File Path: "):]
            return reply(path + ".py", f"# converted {path}")
    return reply("unknown.py", "# converted")


def rate_limited() -> HttpError:
    return HttpError(429, "429 Too Many Requests")


def auth_failed() -> HttpError:
    return HttpError(401, "401 Unauthorized")


class SleepRecorder:
    """Stands in for asyncio.sleep and records delays into an event log."""

    def __init__(self, events: list) -> None:
        self.events = events
        self.delays: list[float] = []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)
        self.events.append(("sleep", delay))


@pytest.fixture
def events():
    return []


@pytest.fixture
def make_provider(events):
    def _make(*script):
        return FakeProvider(script, events=events)

    return _make


@pytest.fixture
def make_batch(events):
    def _make(provider, delay=0.2):
        sleep = SleepRecorder(events)
        batch = BatchConverter(
            FileConverter(StructuredGenerator(provider)), delay=delay, sleep=sleep
        )
        return batch, sleep

    return _make


@pytest.fixture
def sample_files():
    return [
        InputFile(path="src/index.js", content="console.log('hi');\n", name="index.js"),
        InputFile(path="src/util/math.js", content="export const add = (a, b) => a + b;\n", name="math.js"),
        InputFile(path="README.md", content="# Demo\n", name="README.md"),
    ]


@pytest.fixture
def sample_config():
    return PolyglotForgeConfig()
