from beanwire.beans import (
    Access,
    AttributeDefinition,
    BeanDefinition,
    BeanValue,
    ComputedValue,
    LiteralValue,
    as_bean_value,
)
from beanwire.exceptions import (
    BeanAlreadyRegisteredError,
    BeanwireError,
    ConflictingAttributeError,
    InvalidBeanDefinitionError,
    InvalidConstructorError,
    UnknownBeanError,
    UnknownClassError,
)
from beanwire.registry import BeanRegistry
from beanwire.resolver import Resolver
from beanwire.settings import ResolverSettings
from beanwire.type_resolution import TypeDescriptor, TypeResolver

__all__ = [
    "Access",
    "AttributeDefinition",
    "BeanAlreadyRegisteredError",
    "BeanDefinition",
    "BeanRegistry",
    "BeanValue",
    "BeanwireError",
    "ComputedValue",
    "ConflictingAttributeError",
    "InvalidBeanDefinitionError",
    "InvalidConstructorError",
    "LiteralValue",
    "Resolver",
    "ResolverSettings",
    "TypeDescriptor",
    "TypeResolver",
    "UnknownBeanError",
    "UnknownClassError",
    "as_bean_value",
]
