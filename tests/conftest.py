"""Shared fakes for the tip service.

The fake model mirrors the parts of google.generativeai.GenerativeModel the
tips agent uses: generate_content / generate_content_async returning an
object with ``.text``.
"""
import asyncio
import json
from types import SimpleNamespace

import pytest
from core.observability import metrics
from models.tips import TipResponse


class FakeModel:
    def __init__(self, text: str = None, error: Exception = None):
        self.text = text
        self.error = error
        self.calls = []

    def generate_content(self, prompt, **kwargs):
        self.calls.append((prompt, kwargs))
        if self.error:
            raise self.error
        return SimpleNamespace(text=self.text)

    async def generate_content_async(self, prompt, **kwargs):
        return self.generate_content(prompt, **kwargs)


def tips_json(tips, disclaimer="Consult a professional."):
    payload = {"healthTips": tips}
    if disclaimer is not None:
        payload["disclaimer"] = disclaimer
    return json.dumps(payload)


class StubTipsAgent:
    """Returns canned responses; optionally lets the test interleave a call."""

    def __init__(self, response: TipResponse = None, error: Exception = None, on_call=None):
        self.response = response or TipResponse(health_tips=["Walk daily.", "Sleep well.", "Eat greens."])
        self.error = error
        self.on_call = on_call
        self.requests = []

    def run(self, request):
        self.requests.append(request)
        if self.on_call:
            self.on_call()
        if self.error:
            raise self.error
        return self.response

    async def run_async(self, request):
        return self.run(request)


@pytest.fixture(autouse=True)
def reset_metrics():
    metrics.reset()
    yield
    metrics.reset()


class LoopBoundModel(FakeModel):
    """Like Gemini's grpc.aio client: bound to the event loop of its first call."""

    def __init__(self, text: str):
        super().__init__(text)
        self.loops = []

    async def generate_content_async(self, prompt, **kwargs):
        loop = asyncio.get_running_loop()
        if self.loops and loop is not self.loops[0]:
            raise RuntimeError("Event loop is closed")
        self.loops.append(loop)
        return self.generate_content(prompt, **kwargs)
