from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import TYPE_CHECKING, Any

from beanwire.beans import Access, AttributeDefinition, BeanDefinition
from beanwire.exceptions import BeanAlreadyRegisteredError, UnknownBeanError

if TYPE_CHECKING:
    from typing_extensions import Self


class BeanRegistry:
    """Holds the bean definitions a resolver builds objects from."""

    def __init__(self, definitions: Iterable[BeanDefinition] = ()) -> None:
        self._definitions_by_key: dict[str, BeanDefinition] = {}
        for definition in definitions:
            self.add(definition)

    def add(self, definition: BeanDefinition) -> Self:
        """Add a bean definition, refusing to replace an existing key."""
        if definition.key in self._definitions_by_key:
            raise BeanAlreadyRegisteredError(definition.key)
        self._definitions_by_key[definition.key] = definition
        return self

    def add_bean(
        self,
        key: str,
        *,
        value: Any = None,
        class_name: str | None = None,
        access: Access | str = Access.SINGLETON,
        construct: bool = True,
        attributes: Mapping[str, AttributeDefinition] | None = None,
    ) -> BeanDefinition:
        """Build a bean definition from keyword arguments and register it.

        Args:
            key: Key the bean is resolved by.
            value: Literal or zero-argument callable making this a value bean.
            class_name: Name of the type to resolve when no value is given.
            access: ``Access.SINGLETON`` (default) or ``Access.INSTANCE``.
            construct: Instantiate the type, or return the type itself.
            attributes: Per-parameter configuration for the constructor.

        Returns:
            The registered definition.

        """
        definition = BeanDefinition(
            key=key,
            access=access,  # type: ignore[arg-type]
            value=value,
            class_name=class_name,
            construct=construct,
            attributes=attributes or {},
        )
        self.add(definition)
        return definition

    def get(self, key: str) -> BeanDefinition:
        """Get a bean definition by key, failing when it is not registered."""
        definition = self._definitions_by_key.get(key)
        if definition is None:
            raise UnknownBeanError(key)
        return definition

    def find(self, key: str) -> BeanDefinition | None:
        """Get a bean definition by key, if it exists."""
        return self._definitions_by_key.get(key)

    def keys(self) -> list[str]:
        return list(self._definitions_by_key)

    def __contains__(self, key: object) -> bool:
        return key in self._definitions_by_key

    def __iter__(self) -> Iterator[BeanDefinition]:
        return iter(list(self._definitions_by_key.values()))

    def __len__(self) -> int:
        return len(self._definitions_by_key)
