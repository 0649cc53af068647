from __future__ import annotations

import inspect
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, TypeAlias

from beanwire.exceptions import InvalidBeanDefinitionError


class Access(str, Enum):
    """Defines how often a bean is resolved by a resolver."""

    SINGLETON = "singleton"
    """The bean is resolved once and cached for the lifetime of the resolver."""

    INSTANCE = "instance"
    """The bean is resolved again on every request."""


@dataclass(frozen=True, slots=True)
class LiteralValue:
    """A value returned as is, never called."""

    value: Any

    def evaluate(self) -> Any:
        return self.value


@dataclass(frozen=True, slots=True)
class ComputedValue:
    """A zero-argument callable whose result is the value."""

    factory: Callable[[], Any]

    def evaluate(self) -> Any:
        return self.factory()


BeanValue: TypeAlias = LiteralValue | ComputedValue
"""A configured value. ``None`` stands for "no value configured"."""


def as_bean_value(raw: Any) -> BeanValue | None:
    """Normalize a user supplied value into a ``BeanValue``.

    ``None`` means absent. Callables other than classes that can be called
    without arguments become computed values, everything else (falsy objects,
    classes and callables requiring arguments included) is a literal. Wrap an
    object in ``LiteralValue`` explicitly to store ``None`` or a zero-argument
    function as a literal.
    """
    if raw is None or isinstance(raw, LiteralValue | ComputedValue):
        return raw
    if callable(raw) and not isinstance(raw, type) and _accepts_no_arguments(raw):
        return ComputedValue(raw)
    return LiteralValue(raw)


def _accepts_no_arguments(raw: Callable[..., Any]) -> bool:
    try:
        signature = inspect.signature(raw)
    except (TypeError, ValueError):
        return True
    try:
        signature.bind()
    except TypeError:
        return False
    return True


@dataclass(frozen=True, slots=True)
class AttributeDefinition:
    """How a single constructor parameter of a class bean gets its value."""

    value: BeanValue | None = None
    """Literal or computed value. Takes priority over ``reference``."""
    reference: str | None = None
    """Key of another bean used as an alias."""

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", as_bean_value(self.value))

    @property
    def is_conflicting(self) -> bool:
        return self.value is not None and self.reference is not None


@dataclass(frozen=True, kw_only=True)
class BeanDefinition:
    """A declarative description of a bean held by a registry."""

    key: str
    """Symbolic identifier, unique within a registry."""
    access: Access = Access.SINGLETON
    """Caching policy applied by the resolver."""
    value: BeanValue | None = None
    """When present, the bean is a value bean and no class is involved."""
    class_name: str | None = None
    """Name of the type to resolve for class beans."""
    construct: bool = True
    """Whether a class bean is instantiated or returned as the type itself."""
    attributes: Mapping[str, AttributeDefinition] | None = field(default_factory=dict)
    """Per-parameter configuration for the constructor of a class bean. ``None`` means none."""

    def __post_init__(self) -> None:
        try:
            access = Access(self.access)
        except ValueError as error:
            msg = f"Bean {self.key!r} has unknown access {self.access!r}."
            raise InvalidBeanDefinitionError(msg) from error

        value = as_bean_value(self.value)
        if value is None and self.class_name is None:
            msg = f"Bean {self.key!r} needs either a value or a class name."
            raise InvalidBeanDefinitionError(msg)

        attributes = dict(self.attributes or {})
        for name, attribute in attributes.items():
            if not isinstance(attribute, AttributeDefinition):
                msg = (
                    f"Attribute '{name}' of bean {self.key!r} must be an AttributeDefinition, "
                    f"got {type(attribute).__name__}."
                )
                raise InvalidBeanDefinitionError(msg)

        object.__setattr__(self, "access", access)
        object.__setattr__(self, "value", value)
        object.__setattr__(self, "attributes", MappingProxyType(attributes))

    @property
    def is_value_bean(self) -> bool:
        return self.value is not None
