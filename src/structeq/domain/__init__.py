"""Domain layer base classes: EqualityDefinition, Entity, ValueObject."""
from structeq.domain.definition import EqualityDefinition, equals, not_equals
from structeq.domain.entity import Entity
from structeq.domain.value_object import ValueObject, value_object

__all__ = [
    "EqualityDefinition",
    "equals",
    "not_equals",
    "Entity",
    "ValueObject",
    "value_object",
]
