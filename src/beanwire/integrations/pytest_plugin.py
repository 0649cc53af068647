"""Pytest fixtures for tests that wire objects through beanwire.

Enable the plugin from a test module or the root ``conftest.py``::

    pytest_plugins = ["beanwire.integrations.pytest_plugin"]

Override ``bean_registry`` or ``bean_types`` in a test module to provide the
beans and types under test; ``bean_resolver`` picks them up.
"""

from __future__ import annotations

import pytest

from beanwire.registry import BeanRegistry
from beanwire.resolver import Resolver
from beanwire.settings import ResolverSettings
from beanwire.type_resolution import TypeResolver


@pytest.fixture()
def bean_registry() -> BeanRegistry:
    """Create an empty, per-test bean registry.

    Returns:
        A new ``BeanRegistry`` instance.

    """
    return BeanRegistry()


@pytest.fixture()
def bean_resolver_settings() -> ResolverSettings:
    """Create resolver settings from the environment of the test run."""
    return ResolverSettings()


@pytest.fixture()
def bean_types(bean_resolver_settings: ResolverSettings) -> TypeResolver:
    """Create a per-test type table honoring ``import_fallback`` from the settings."""
    return TypeResolver(import_fallback=bean_resolver_settings.import_fallback)


@pytest.fixture()
def bean_resolver(
    bean_registry: BeanRegistry,
    bean_types: TypeResolver,
    bean_resolver_settings: ResolverSettings,
) -> Resolver:
    """Create a resolver over the per-test registry and type table.

    The fixture is function-scoped, so cached singletons never leak between
    tests.

    Returns:
        A new ``Resolver`` instance.

    """
    return Resolver(bean_registry, types=bean_types, settings=bean_resolver_settings)
