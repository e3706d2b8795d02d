"""FastAPI dependency injection."""

from __future__ import annotations

from customiser.config import Settings, settings
from customiser.engine.registry import ModelRegistry, get_registry


def get_settings() -> Settings:
    return settings


def get_model_registry() -> ModelRegistry:
    return get_registry()
