import pytest

from beanwire.beans import Access, AttributeDefinition, BeanDefinition, LiteralValue
from beanwire.exceptions import BeanAlreadyRegisteredError, UnknownBeanError
from beanwire.registry import BeanRegistry


def test_get_returns_registered_definition(registry: BeanRegistry) -> None:
    definition = BeanDefinition(key="foo", value=1)
    registry.add(definition)

    assert registry.get("foo") is definition


def test_get_unknown_key_raises(registry: BeanRegistry) -> None:
    with pytest.raises(UnknownBeanError) as exc_info:
        registry.get("missing")

    assert exc_info.value.key == "missing"
    assert "missing" in str(exc_info.value)


def test_find_returns_none_for_unknown_key(registry: BeanRegistry) -> None:
    assert registry.find("missing") is None


def test_add_is_chainable(registry: BeanRegistry) -> None:
    registry.add(BeanDefinition(key="a", value=1)).add(BeanDefinition(key="b", value=2))

    assert registry.keys() == ["a", "b"]


def test_add_refuses_duplicate_key(registry: BeanRegistry) -> None:
    registry.add(BeanDefinition(key="foo", value=1))

    with pytest.raises(BeanAlreadyRegisteredError) as exc_info:
        registry.add(BeanDefinition(key="foo", value=2))

    assert exc_info.value.key == "foo"
    assert registry.get("foo").value == LiteralValue(1)


def test_add_bean_builds_definition() -> None:
    registry = BeanRegistry()

    definition = registry.add_bean(
        "service",
        class_name="Service",
        access=Access.INSTANCE,
        construct=False,
        attributes={"dep": AttributeDefinition(reference="other")},
    )

    assert registry.get("service") is definition
    assert definition.access is Access.INSTANCE
    assert definition.construct is False
    assert definition.attributes["dep"].reference == "other"


def test_registry_from_definitions() -> None:
    definitions = [BeanDefinition(key="a", value=1), BeanDefinition(key="b", value=2)]

    registry = BeanRegistry(definitions)

    assert len(registry) == 2
    assert "a" in registry
    assert "c" not in registry
    assert list(registry) == definitions
