import asyncio
import json

import pytest
from aiohttp import web
from aiohttp import test_utils

from idea_roulette.common.state import Idea
from idea_roulette.llm.ollama import PROBE_PROMPT, OllamaClient, OllamaError
from idea_roulette.llm.variation import OFFLINE_SPICE, IdeaRewriter


def run_against(handler, action):
    """Start a throwaway /api/generate server and run `action(client)`."""
    seen = []

    async def recorder(request):
        seen.append(await request.json())
        return await handler(request)

    async def scenario():
        app = web.Application()
        app.router.add_post("/api/generate", recorder)
        async with test_utils.TestServer(app) as server:
            url = str(server.make_url("/api/generate"))
            async with OllamaClient(url=url, model="llama3", timeout=5) as client:
                return await action(client)

    return asyncio.run(scenario()), seen


def reply_with(payload, status=200):
    async def handler(request):
        return web.json_response(payload, status=status)

    return handler


def test_generate_sends_model_prompt_and_no_streaming():
    result, seen = run_against(
        reply_with({"response": "hello"}),
        lambda client: client.generate("tell me something"),
    )

    assert result == "hello"
    assert seen == [{"model": "llama3", "prompt": "tell me something", "stream": False}]


def test_generate_raises_on_http_error():
    with pytest.raises(OllamaError):
        run_against(reply_with({"error": "boom"}, status=500), lambda c: c.generate("x"))


def test_generate_raises_on_missing_response_field():
    with pytest.raises(OllamaError):
        run_against(reply_with({"done": True}), lambda c: c.generate("x"))


def test_generate_raises_on_non_json_body():
    async def handler(request):
        return web.Response(text="definitely not json")

    with pytest.raises(OllamaError):
        run_against(handler, lambda c: c.generate("x"))


def test_probe_accepts_ok_reply():
    result, seen = run_against(reply_with({"response": " OK."}), lambda c: c.probe())

    assert result is True
    assert seen[0]["prompt"] == PROBE_PROMPT


@pytest.mark.parametrize(
    "payload,status",
    [
        ({"response": "Hello there!"}, 200),
        ({"response": ""}, 200),
        ({"model": "llama3"}, 200),
        ({"error": "model not found"}, 404),
    ],
)
def test_probe_rejects_bad_replies(payload, status):
    result, _ = run_against(reply_with(payload, status=status), lambda c: c.probe())
    assert result is False


def test_probe_unreachable_host():
    async def scenario():
        # port 9 (discard) on localhost is not expected to run an HTTP server
        async with OllamaClient(url="http://127.0.0.1:9/api/generate", timeout=2) as client:
            return await client.probe()

    assert asyncio.run(scenario()) is False


async def not_utf8(request):
    return web.Response(body=b'{"response": "\xff\xfe OK"}', content_type="application/json")


def test_generate_raises_on_undecodable_body():
    with pytest.raises(OllamaError):
        run_against(not_utf8, lambda c: c.generate("x"))


def test_undecodable_body_is_absorbed():
    idea = Idea("Goblet squats", "Goblet squats", "Just do it!", "🌶️")

    probed, _ = run_against(not_utf8, lambda c: c.probe())
    varied, _ = run_against(not_utf8, lambda c: IdeaRewriter(c).vary(idea))

    assert probed is False
    assert varied.spice == OFFLINE_SPICE
    assert varied.title == "Goblet squats (SATIRICAL VERSION)"
