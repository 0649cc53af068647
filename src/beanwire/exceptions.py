from __future__ import annotations

from collections.abc import Sequence


class BeanwireError(Exception):
    """Represent a base class for all beanwire-specific failures.

    Catch this type when you want to handle any beanwire error path without
    matching each concrete exception class individually.
    """


class InvalidBeanDefinitionError(BeanwireError):
    """Signal a malformed bean or attribute definition.

    Raised while building ``BeanDefinition`` objects, for example when a bean
    has neither a value nor a class name, or when ``access`` is not a known
    access mode.
    """


class BeanAlreadyRegisteredError(BeanwireError):
    """Signal that a registry already holds a bean under the given key.

    Typical fix is choosing a different key or building a new registry instead
    of re-registering the bean.
    """

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"A bean is already registered under the key {key!r}.")


class UnknownBeanError(BeanwireError):
    """Signal that a bean key has no definition in the registry.

    Raised by ``BeanRegistry.get`` and therefore by ``Resolver.resolve``, both
    for the requested key and for any nested key reached while wiring
    constructor parameters.

    Typical fixes include registering the missing bean, or adding an attribute
    definition with a value or a reference for the constructor parameter that
    names it.
    """

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"No bean is registered under the key {key!r}.")


class UnknownClassError(BeanwireError):
    """Signal that a class name cannot be turned into a type.

    Raised by ``TypeResolver.get`` when the name is neither registered nor
    importable as a dotted path.
    """

    def __init__(self, class_name: str | None) -> None:
        self.class_name = class_name
        super().__init__(f"Unable to resolve class name {class_name!r} to a type.")


class InvalidConstructorError(BeanwireError):
    """Signal a constructor that cannot be called with keyword arguments only.

    Beans are wired by parameter name, so every constructor parameter must be
    passable by keyword. Positional-only parameters and ``*args`` are refused
    before the class is instantiated.
    """

    def __init__(self, class_name: str, parameters: Sequence[str]) -> None:
        self.class_name = class_name
        self.parameters = tuple(parameters)
        names = ", ".join(f"'{name}'" for name in self.parameters)
        super().__init__(
            f"Only keyword arguments are allowed: constructor of '{class_name}' "
            f"declares parameters that cannot be passed by name: {names}.",
        )


class ConflictingAttributeError(BeanwireError):
    """Signal an attribute configured with both a value and a reference.

    Only raised when the resolver runs with
    ``conflicting_attributes="error"``; by default the value wins.
    """

    def __init__(self, key: str, attribute: str) -> None:
        self.key = key
        self.attribute = attribute
        super().__init__(
            f"Attribute '{attribute}' of bean {key!r} defines both a value and a reference.",
        )
