import pytest
from pydantic import ValidationError

from beanwire.registry import BeanRegistry
from beanwire.resolver import Resolver
from beanwire.settings import ResolverSettings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("BEANWIRE_IMPORT_FALLBACK", raising=False)
    monkeypatch.delenv("BEANWIRE_CONFLICTING_ATTRIBUTES", raising=False)

    settings = ResolverSettings()

    assert settings.import_fallback is True
    assert settings.conflicting_attributes == "prefer_value"


def test_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BEANWIRE_IMPORT_FALLBACK", "false")
    monkeypatch.setenv("BEANWIRE_CONFLICTING_ATTRIBUTES", "error")

    settings = ResolverSettings()

    assert settings.import_fallback is False
    assert settings.conflicting_attributes == "error"


def test_rejects_unknown_conflict_mode() -> None:
    with pytest.raises(ValidationError):
        ResolverSettings(conflicting_attributes="ignore")  # type: ignore[arg-type]


def test_resolver_builds_type_resolver_from_settings() -> None:
    resolver = Resolver(BeanRegistry(), settings=ResolverSettings(import_fallback=False))

    assert resolver.types.import_fallback is False


def test_resolver_keeps_given_registry() -> None:
    registry = BeanRegistry()

    assert Resolver(registry).registry is registry
