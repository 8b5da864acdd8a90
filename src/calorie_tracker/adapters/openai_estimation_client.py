"""OpenAI Responses API client for nutrition and burn estimates."""

from dataclasses import dataclass

import httpx
from openai import AsyncOpenAI, OpenAIError

from calorie_tracker.errors import UpstreamUnavailable
from calorie_tracker.services.estimation import EstimationClient


@dataclass
class OpenAIEstimationClient(EstimationClient):
    """Estimation client backed by OpenAI Responses API."""

    client: AsyncOpenAI
    http_client: httpx.AsyncClient | None = None

    @classmethod
    def create(
        cls, api_key: str, timeout_seconds: float, base_url: str | None = None
    ) -> "OpenAIEstimationClient":
        """Create a client that never retries and honours the given timeout."""
        http_client = httpx.AsyncClient(timeout=httpx.Timeout(timeout_seconds))
        client = AsyncOpenAI(
            api_key=api_key,
            base_url=base_url,
            max_retries=0,
            timeout=timeout_seconds,
            http_client=http_client,
        )
        return cls(client=client, http_client=http_client)

    async def generate(
        self,
        *,
        model: str,
        prompt: str,
        image_data_url: str | None = None,
    ) -> str:
        """Send the prompt (and image, if any) and return the reply text."""
        content: list[dict[str, object]] = [{"type": "input_text", "text": prompt}]
        if image_data_url:
            content.append({"type": "input_image", "image_url": image_data_url})
        try:
            response = await self.client.responses.create(
                model=model,
                input=[{"role": "user", "content": content}],
                store=False,
            )
        except OpenAIError as exc:
            raise UpstreamUnavailable(f"{type(exc).__name__}: {exc}") from exc
        return response.output_text or ""

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        if self.http_client is not None:
            await self.http_client.aclose()
