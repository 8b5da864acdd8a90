"""Tests for container wiring."""

import asyncio

from calorie_tracker.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)
    assert container.stats_service is not None
    assert container.estimation_service.client is not None
    asyncio.run(container.close_resources())


def test_build_container_without_ai_key(settings) -> None:
    container = build_container(settings.model_copy(update={"openai_api_key": None}))
    assert container.estimation_service.client is None
    asyncio.run(container.close_resources())
