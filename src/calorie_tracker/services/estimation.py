"""Nutrition and calorie-burn estimation using a generative model."""

import asyncio
import base64
import json
import logging
import re
from dataclasses import dataclass
from typing import Protocol, TypeVar

from pydantic import BaseModel, ValidationError

from calorie_tracker.domain.estimates import BurnEstimate, MealEstimate
from calorie_tracker.errors import (
    ConfigurationError,
    MalformedResponse,
    UpstreamUnavailable,
    ValidationFailure,
)

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

MEAL_PROMPT = """\
Analyze this food image. Identify the meal and estimate the nutritional content.
Return ONLY a valid JSON object with the following structure:
{
  "meal_name": "Name of the food",
  "calories": number (integer estimate),
  "protein": number (grams, estimate),
  "carbs": number (grams, estimate),
  "fat": number (grams, estimate),
  "reasoning": "Short explanation of how you arrived at these numbers"
}
Do not add any markdown formatting. Just the raw JSON string.
"""

BURN_PROMPT_TEMPLATE = """\
Estimate the calories burned and duration for the following activity: "{activity}".
Assume an average adult (75kg).
Return purely a JSON object with no markdown formatting.
Format:
{{
  "name": "Short standardized name of activity (e.g. Running, HIIT)",
  "calories": number (estimated total calories burned),
  "duration": number (estimated duration in minutes, if not specified assume 30),
  "confidence": "high" or "low"
}}
"""

_FENCE_OPEN = re.compile(r"^```[a-zA-Z]*\s*")
_FENCE_CLOSE = re.compile(r"\s*```$")


class EstimationClient(Protocol):
    """Interface for a text/vision generative model."""

    async def generate(
        self,
        *,
        model: str,
        prompt: str,
        image_data_url: str | None = None,
    ) -> str:
        """Return the raw text reply for a prompt, optionally with an image.

        Implementations raise UpstreamUnavailable when the call cannot complete.
        """


@dataclass
class EstimationService:
    """Builds estimation prompts and validates model replies."""

    client: EstimationClient | None
    model: str
    timeout_seconds: float = 30.0

    async def analyze_meal_image(
        self, image_bytes: bytes, media_type: str | None = None
    ) -> MealEstimate:
        """Estimate a meal's nutrition from a photo.

        Raises MalformedResponse or UpstreamUnavailable when no valid estimate
        is available; nothing is stored either way.
        """
        if not image_bytes:
            raise ValidationFailure("No image uploaded")
        resolved_type = media_type or ""
        if not resolved_type.startswith("image/"):
            sniffed = _detect_mime_type(image_bytes)
            if sniffed is None:
                raise ValidationFailure(
                    f"Unsupported media type: {resolved_type or 'unknown'}"
                )
            resolved_type = sniffed
        raw = await self._generate(
            MEAL_PROMPT, image_data_url=_to_data_url(image_bytes, resolved_type)
        )
        return _parse_reply(raw, MealEstimate)

    async def estimate_burn(self, description: str) -> BurnEstimate:
        """Estimate calories burned for a described activity.

        Only a missing key or an empty description raise. Any other failure
        yields the low-confidence zero estimate and the caller should ask for
        manual entry.
        """
        activity = description.strip()
        if not activity:
            raise ValidationFailure("Query required")
        prompt = BURN_PROMPT_TEMPLATE.format(activity=activity.replace('"', "'"))
        try:
            raw = await self._generate(prompt)
            return _parse_reply(raw, BurnEstimate)
        except (ConfigurationError, ValidationFailure):
            raise
        except Exception:
            logger.warning(
                "Burn estimate unavailable, returning fallback",
                exc_info=True,
                extra={"activity": activity},
            )
            return BurnEstimate.unavailable()

    async def _generate(self, prompt: str, image_data_url: str | None = None) -> str:
        if self.client is None:
            raise ConfigurationError("Missing AI key")
        try:
            return await asyncio.wait_for(
                self.client.generate(
                    model=self.model, prompt=prompt, image_data_url=image_data_url
                ),
                timeout=self.timeout_seconds,
            )
        except TimeoutError as exc:
            raise UpstreamUnavailable(
                f"Model call exceeded {self.timeout_seconds:g}s"
            ) from exc


def strip_code_fences(text: str) -> str:
    """Remove a markdown code fence wrapped around a reply."""
    cleaned = text.strip()
    cleaned = _FENCE_OPEN.sub("", cleaned)
    cleaned = _FENCE_CLOSE.sub("", cleaned)
    return cleaned.strip()


def _parse_reply(raw: str, model_type: type[ModelT]) -> ModelT:
    cleaned = strip_code_fences(raw)
    try:
        payload = json.loads(cleaned)
    except json.JSONDecodeError as exc:
        raise MalformedResponse(f"Reply is not JSON: {cleaned[:80]!r}") from exc
    if not isinstance(payload, dict):
        raise MalformedResponse("Reply is not a JSON object")
    try:
        return model_type.model_validate(payload)
    except ValidationError as exc:
        raise MalformedResponse(
            f"Reply does not match {model_type.__name__}: {exc.error_count()} errors"
        ) from exc


def _to_data_url(image_bytes: bytes, mime_type: str) -> str:
    """Convert bytes to a base64 data URL for image input."""
    encoded = base64.b64encode(image_bytes).decode("utf-8")
    return f"data:{mime_type};base64,{encoded}"


def _detect_mime_type(image_bytes: bytes) -> str | None:
    """Infer a basic image MIME type from file signatures."""
    if image_bytes.startswith(b"\xff\xd8\xff"):
        return "image/jpeg"
    if image_bytes.startswith(b"\x89PNG\r\n\x1a\n"):
        return "image/png"
    if image_bytes[:4] == b"RIFF" and image_bytes[8:12] == b"WEBP":
        return "image/webp"
    return None
