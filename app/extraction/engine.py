from __future__ import annotations

import base64
import logging
from typing import Any, Dict, List, Type

from openai import AsyncOpenAI
from pydantic import BaseModel

from app.core.config import settings
from app.core.errors import AgentRunError

logger = logging.getLogger(__name__)


# -----------------------
# Helpers
# -----------------------

def build_data_url(data: bytes, media_type: str | None) -> str:
    b64 = base64.b64encode(data).decode("ascii")
    return f"data:{media_type or 'application/octet-stream'};base64,{b64}"


def _get_openai_client() -> AsyncOpenAI:
    api_key = settings.openai_api_key
    if not api_key:
        raise AgentRunError("OPENAI_API_KEY is missing")
    return AsyncOpenAI(api_key=api_key)


def _user_message(*, directive: str, image_data_url: str) -> List[Dict[str, Any]]:
    return [
        {
            "role": "user",
            "content": [
                {"type": "input_text", "text": directive},
                {"type": "input_image", "image_url": image_data_url, "detail": "auto"},
            ],
        }
    ]


# -----------------------
# Public API
# -----------------------

class AgentRunner:
    """
    Runs one structured-output extraction against an image.
    The output model is passed as the response format, so the result is
    already validated against it.
    """

    def __init__(self, *, client: AsyncOpenAI | None = None, model: str | None = None) -> None:
        self._client = client
        self.model = model or settings.openai_model

    @property
    def client(self) -> AsyncOpenAI:
        if self._client is None:
            self._client = _get_openai_client()
        return self._client

    async def run(
        self,
        *,
        agent_name: str,
        instructions: str,
        output_type: Type[BaseModel],
        directive: str,
        image_data_url: str,
    ) -> BaseModel:
        logger.info("running %s (model=%s, output=%s)", agent_name, self.model, output_type.__name__)

        resp = await self.client.responses.parse(
            model=self.model,
            instructions=instructions,
            input=_user_message(directive=directive, image_data_url=image_data_url),
            text_format=output_type,
            metadata={"agent": agent_name},
        )

        parsed = resp.output_parsed
        if parsed is None:
            raise AgentRunError(f"{agent_name} returned no structured output")
        return parsed


_runner: AgentRunner | None = None


def get_agent_runner() -> AgentRunner:
    global _runner
    if _runner is None:
        _runner = AgentRunner()
    return _runner
