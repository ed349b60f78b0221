from __future__ import annotations

import json
import logging
from typing import List, Optional

from openai import AsyncOpenAI, OpenAIError
from pydantic import ValidationError

from servicedir.core.config import Settings
from servicedir.core.errors import UpstreamFailure
from servicedir.schemas.ai import LinkSummary

logger = logging.getLogger(__name__)

SUMMARY_SYSTEM = (
    "You are an expert at summarizing official website content into plain English.\n"
    "Reply with a JSON object with keys: title, description, steps, suggested_tags.\n"
    "- title: a short, clear title for the service "
    "(e.g. \"Apply for a Tax File Number\").\n"
    "- description: a plain-English description of what the service is and why "
    "someone would need it.\n"
    "- steps: 3-5 simple, actionable steps.\n"
    "- suggested_tags: zero or more tags, chosen ONLY from the allowed tags list.\n"
)

ICON_PROMPT = (
    "A single minimalist, modern, abstract icon on a plain single-colour "
    "background, representing the online service found at {url}."
)


class TextGenerator:
    """
    Client for the external text/image generation service.
    Any failure surfaces as ``UpstreamFailure``, never as an empty summary.
    """

    def __init__(self, settings: Settings, client: Optional[AsyncOpenAI] = None):
        self.settings = settings
        self._client = client

    @property
    def client(self) -> AsyncOpenAI:
        if self._client is None:
            key = (self.settings.openai_api_key or "").strip()
            if not key:
                raise UpstreamFailure("text-generation", "OPENAI_API_KEY is missing")
            self._client = AsyncOpenAI(api_key=key)
        return self._client

    async def summarize_link(self, url: str, allowed_tags: Optional[List[str]] = None) -> LinkSummary:
        user = f"URL: {url}\n\nALLOWED TAGS:\n" + "\n".join(allowed_tags or [])
        try:
            resp = await self.client.chat.completions.create(
                model=self.settings.openai_model,
                temperature=0.0,
                response_format={"type": "json_object"},
                messages=[
                    {"role": "system", "content": SUMMARY_SYSTEM},
                    {"role": "user", "content": user},
                ],
            )
        except OpenAIError as exc:
            logger.warning("Summarization failed for %s: %s", url, exc)
            raise UpstreamFailure("text-generation", str(exc)) from exc

        if not resp.choices:
            logger.warning("Empty summary reply for %s", url)
            raise UpstreamFailure("text-generation", "empty reply")
        content = (resp.choices[0].message.content or "").strip()

        try:
            summary = LinkSummary.model_validate(json.loads(content))
        except (json.JSONDecodeError, ValidationError) as exc:
            logger.warning("Unusable summary for %s: %s", url, exc)
            raise UpstreamFailure("text-generation", "malformed summary") from exc

        if allowed_tags is not None:
            summary.suggested_tags = [t for t in summary.suggested_tags if t in allowed_tags]
        return summary

    async def generate_icon(self, url: str) -> str:
        """Returns a data URI (base64 PNG)."""
        try:
            resp = await self.client.images.generate(
                model=self.settings.openai_image_model,
                prompt=ICON_PROMPT.format(url=url),
                size="1024x1024",
                response_format="b64_json",
                n=1,
            )
        except OpenAIError as exc:
            logger.warning("Icon generation failed for %s: %s", url, exc)
            raise UpstreamFailure("image-generation", str(exc)) from exc

        b64 = resp.data[0].b64_json if resp.data else None
        if not b64:
            raise UpstreamFailure("image-generation", "empty image")
        return f"data:image/png;base64,{b64}"
