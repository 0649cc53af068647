from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class ResolverSettings(BaseSettings):
    """Resolver configuration, read from ``BEANWIRE_*`` environment variables.

    Example:
        ``BEANWIRE_IMPORT_FALLBACK=false`` restricts class beans to types
        registered on the ``TypeResolver``.

    """

    model_config = SettingsConfigDict(env_prefix="BEANWIRE_", frozen=True)

    import_fallback: bool = True
    """Resolve unregistered class names as dotted import paths."""

    conflicting_attributes: Literal["prefer_value", "error"] = "prefer_value"
    """What to do with an attribute that has both a value and a reference."""
