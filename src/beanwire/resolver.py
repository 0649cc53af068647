from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, cast

from beanwire.beans import Access, BeanDefinition, BeanValue
from beanwire.exceptions import ConflictingAttributeError, InvalidConstructorError
from beanwire.registry import BeanRegistry
from beanwire.settings import ResolverSettings
from beanwire.type_resolution import TypeResolver

logger = logging.getLogger(__name__)


class Resolver:
    """Builds objects out of the bean definitions of a registry.

    Singleton beans are resolved once and cached for the lifetime of the
    resolver; instance beans are resolved on every call. Constructor parameters
    of class beans are wired by name: an attribute definition may supply a
    value or a reference to another bean, otherwise the parameter name itself is
    resolved as a bean key.

    The resolver is not thread-safe and does not detect cyclic bean graphs,
    which end in ``RecursionError``.
    """

    __slots__ = ("_registry", "_settings", "_singletons", "_types")

    def __init__(
        self,
        registry: BeanRegistry,
        *,
        types: TypeResolver | None = None,
        settings: ResolverSettings | None = None,
    ) -> None:
        self._settings = settings if settings is not None else ResolverSettings()
        self._registry = registry
        if types is None:
            types = TypeResolver(import_fallback=self._settings.import_fallback)
        self._types = types
        self._singletons: dict[str, Any] = {}

    @property
    def registry(self) -> BeanRegistry:
        return self._registry

    @property
    def types(self) -> TypeResolver:
        return self._types

    @property
    def singletons(self) -> Mapping[str, Any]:
        """Read-only view of the singleton beans resolved so far."""
        return MappingProxyType(self._singletons)

    def resolve(self, key: str) -> Any:
        """Resolve a bean by key.

        Args:
            key: Key of a bean registered in the registry.

        Returns:
            The bean instance or value. Class beans registered with
            ``construct=False`` resolve to the type itself.

        Raises:
            UnknownBeanError: The key, or a nested key, is not registered.
            UnknownClassError: A class bean names a type that cannot be found.
            InvalidConstructorError: A constructor takes parameters that cannot
                be passed by name.

        """
        definition = self._registry.get(key)

        if definition.access is Access.INSTANCE:
            return self._resolve_bean(definition)

        if key in self._singletons:
            logger.debug("Singleton bean %r served from cache", key)
            return self._singletons[key]

        instance = self._resolve_bean(definition)
        self._singletons[key] = instance
        logger.debug("Singleton bean %r cached", key)
        return instance

    def _resolve_bean(self, definition: BeanDefinition) -> Any:
        if definition.is_value_bean:
            return self._resolve_value_bean(definition)
        return self._resolve_class_bean(definition)

    def _resolve_value_bean(self, definition: BeanDefinition) -> Any:
        return cast("BeanValue", definition.value).evaluate()

    def _resolve_class_bean(self, definition: BeanDefinition) -> Any:
        descriptor = self._types.get(definition.class_name)
        if not definition.construct:
            return descriptor.type

        unnamed = descriptor.positional_only_names()
        if unnamed:
            raise InvalidConstructorError(descriptor.name, unnamed)

        parameter_names = descriptor.parameter_names()
        if not parameter_names:
            logger.debug("Constructing bean %r as %s()", definition.key, descriptor.name)
            return descriptor.construct({})

        arguments = {name: self._resolve_attribute(definition, name) for name in parameter_names}
        logger.debug(
            "Constructing bean %r as %s with arguments %s",
            definition.key,
            descriptor.name,
            ", ".join(parameter_names),
        )
        return descriptor.construct(arguments)

    def _resolve_attribute(self, definition: BeanDefinition, name: str) -> Any:
        attribute = definition.attributes.get(name)
        if attribute is None:
            return self.resolve(name)

        if attribute.is_conflicting and self._settings.conflicting_attributes == "error":
            raise ConflictingAttributeError(definition.key, name)

        if attribute.value is not None:
            return attribute.value.evaluate()
        if attribute.reference is not None:
            return self.resolve(attribute.reference)
        return self.resolve(name)
