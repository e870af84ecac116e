import json
import logging
import re

import anthropic

from app.config import settings
from app.schemas.research import ResearchResult, SearchInput
from app.services.demo_generator import generate_demo_result
from app.services.errors import EmptyResponseError, MissingInputError, ResultParseError, UpstreamError
from app.services.normalizer import normalize_result
from app.services.prompts import build_prompt

logger = logging.getLogger(__name__)

_OPEN_FENCE = re.compile(r"^```(?:json)?\n?")
_CLOSE_FENCE = re.compile(r"\n?```$")


def strip_code_fences(text: str) -> str:
    """Remove a ```json ... ``` wrapper if the model added one anyway."""
    cleaned = text.strip()
    if cleaned.startswith("```"):
        cleaned = _CLOSE_FENCE.sub("", _OPEN_FENCE.sub("", cleaned))
    return cleaned


def parse_research_text(text: str) -> ResearchResult:
    try:
        data = json.loads(strip_code_fences(text))
    except json.JSONDecodeError as e:
        raise ResultParseError() from e
    return normalize_result(data)


class ResearchService:
    """Turn one SearchInput into a ResearchResult, live or from demo data."""

    def __init__(self, client=None, demo_mode: bool | None = None):
        self.demo_mode = settings.demo_mode if demo_mode is None else demo_mode
        self.model = settings.research_model
        self.max_tokens = settings.research_max_tokens
        if client is None and not self.demo_mode:
            client = anthropic.AsyncAnthropic(api_key=settings.anthropic_api_key)
        self.client = client

    async def aclose(self):
        if self.client is not None and hasattr(self.client, "close"):
            await self.client.close()

    async def research(self, search: SearchInput) -> ResearchResult:
        mode = "demo" if self.demo_mode else "live"
        if not search.has_identifying_info():
            logger.warning("Rejected %s research request with no identifying fields", mode)
            raise MissingInputError()

        logger.info("Research request (%s) with fields: %s", mode, ", ".join(search.supplied_fields()))
        if self.demo_mode:
            return generate_demo_result(search)
        return await self._research_live(search)

    async def _research_live(self, search: SearchInput) -> ResearchResult:
        prompt = build_prompt(search)

        try:
            response = await self.client.messages.create(
                model=self.model,
                max_tokens=self.max_tokens,
                messages=[{"role": "user", "content": prompt}],
            )
        except Exception as e:
            logger.exception("Research model call failed")
            raise UpstreamError(str(e)) from e

        text_block = next(
            (block for block in response.content if getattr(block, "type", None) == "text"),
            None,
        )
        if text_block is None:
            logger.error("Research model reply had no text block")
            raise EmptyResponseError()

        try:
            return parse_research_text(text_block.text)
        except ResultParseError:
            logger.error("Could not parse research reply as JSON: %.200s", text_block.text)
            raise
