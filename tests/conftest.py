"""Shared pytest fixtures for beanwire tests."""

import pytest

from beanwire.registry import BeanRegistry
from beanwire.resolver import Resolver
from beanwire.settings import ResolverSettings
from beanwire.type_resolution import TypeResolver


@pytest.fixture()
def registry() -> BeanRegistry:
    """Empty bean registry."""
    return BeanRegistry()


@pytest.fixture()
def types() -> TypeResolver:
    """Type table without the dotted import path fallback."""
    return TypeResolver(import_fallback=False)


@pytest.fixture()
def resolver(registry: BeanRegistry, types: TypeResolver) -> Resolver:
    """Resolver over the shared registry and type table, with default settings."""
    return Resolver(registry, types=types, settings=ResolverSettings())
