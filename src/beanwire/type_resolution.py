from __future__ import annotations

import importlib
import inspect
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from inspect import Parameter
from typing import Any, TypeVar

from beanwire.exceptions import UnknownClassError

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=type)

_NAME_ADDRESSABLE_KINDS = (Parameter.POSITIONAL_OR_KEYWORD, Parameter.KEYWORD_ONLY)
_UNNAMED_KINDS = (Parameter.POSITIONAL_ONLY, Parameter.VAR_POSITIONAL)


@dataclass(frozen=True, slots=True)
class TypeDescriptor:
    """Constructor capabilities of a type that class beans are built from."""

    type: type[Any]
    parameters: tuple[Parameter, ...]

    @classmethod
    def from_type(cls, target: type[Any]) -> TypeDescriptor:
        """Read the constructor signature of ``target``.

        Types without an introspectable signature (some builtins and extension
        types) are described as taking no parameters.
        """
        try:
            parameters = tuple(inspect.signature(target).parameters.values())
        except (TypeError, ValueError):
            parameters = ()
        return cls(type=target, parameters=parameters)

    @property
    def name(self) -> str:
        return getattr(self.type, "__qualname__", repr(self.type))

    def parameter_names(self) -> tuple[str, ...]:
        """Names of the parameters a constructor call can receive.

        ``**kwargs`` has no name of its own and is left out.
        """
        return tuple(
            parameter.name
            for parameter in self.parameters
            if parameter.kind is not Parameter.VAR_KEYWORD
        )

    def is_name_addressable(self, name: str) -> bool:
        return any(
            parameter.name == name and parameter.kind in _NAME_ADDRESSABLE_KINDS
            for parameter in self.parameters
        )

    def positional_only_names(self) -> tuple[str, ...]:
        return tuple(
            parameter.name for parameter in self.parameters if parameter.kind in _UNNAMED_KINDS
        )

    def construct(self, arguments: Mapping[str, Any]) -> Any:
        return self.type(**arguments)


class TypeResolver:
    """Turns class names of bean definitions into type descriptors.

    Types are looked up in an explicit registration table first. When
    ``import_fallback`` is enabled, unregistered names are treated as dotted
    import paths, either ``"package.module.Class"`` or
    ``"package.module:Outer.Inner"``.
    """

    def __init__(
        self,
        types: Mapping[str, type[Any]] | None = None,
        *,
        import_fallback: bool = True,
    ) -> None:
        self._types: dict[str, type[Any]] = dict(types or {})
        self._descriptors: dict[str, TypeDescriptor] = {}
        self._import_fallback = import_fallback

    @property
    def import_fallback(self) -> bool:
        return self._import_fallback

    def register(self, cls: T, /, name: str | None = None) -> T:
        """Register ``cls`` under ``name`` (its ``__qualname__`` by default).

        Returns ``cls`` unchanged, so the method can be used as a class decorator.
        """
        type_name = name or cls.__qualname__
        self._types[type_name] = cls
        self._descriptors.pop(type_name, None)
        return cls

    def get(self, name: str | None) -> TypeDescriptor:
        """Get the descriptor of the type registered or importable as ``name``."""
        if not name:
            raise UnknownClassError(name)

        descriptor = self._descriptors.get(name)
        if descriptor is not None:
            return descriptor

        target = self._types.get(name)
        if target is None:
            if not self._import_fallback:
                raise UnknownClassError(name)
            target = self._import_type(name)

        descriptor = TypeDescriptor.from_type(target)
        self._descriptors[name] = descriptor
        return descriptor

    def __contains__(self, name: object) -> bool:
        return name in self._types

    def _import_type(self, name: str) -> type[Any]:
        import_error: ModuleNotFoundError | None = None
        for module_name, qualname in self._import_candidates(name):
            try:
                module = importlib.import_module(module_name)
            except ModuleNotFoundError as error:
                if not _is_missing_module(error, module_name):
                    raise UnknownClassError(name) from error
                import_error = error
                continue

            target: Any = module
            try:
                for attribute in qualname.split("."):
                    target = getattr(target, attribute)
            except AttributeError as error:
                raise UnknownClassError(name) from error

            if not isinstance(target, type):
                raise UnknownClassError(name)
            logger.debug("Imported type %s from module %s", qualname, module_name)
            return target

        raise UnknownClassError(name) from import_error

    def _import_candidates(self, name: str) -> list[tuple[str, str]]:
        if ":" in name:
            module_name, _, qualname = name.partition(":")
            if not module_name or not qualname:
                return []
            return [(module_name, qualname)]

        # Longest module path first, so "pkg.mod.Outer.Inner" tries "pkg.mod.Outer" before "pkg".
        parts = name.split(".")
        return [
            (".".join(parts[:index]), ".".join(parts[index:]))
            for index in range(len(parts) - 1, 0, -1)
        ]


def _is_missing_module(error: ModuleNotFoundError, module_name: str) -> bool:
    """Whether ``error`` reports ``module_name`` itself (or a parent package) as missing."""
    missing = error.name
    if not missing:
        return False
    return module_name == missing or module_name.startswith(f"{missing}.")
