from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol


class AbilityError(Exception):
    """Base class for ability registry errors."""


class AbilityNotFoundError(AbilityError):
    def __init__(self, ability_id: str) -> None:
        super().__init__(f"Ability not found: {ability_id}")
        self.ability_id = ability_id


class AbilityParameterError(AbilityError):
    def __init__(self, message: str, parameter: str) -> None:
        super().__init__(message)
        self.parameter = parameter

    @classmethod
    def missing(cls, parameter: str) -> AbilityParameterError:
        return cls(f"Missing required parameter: {parameter}", parameter)

    @classmethod
    def invalid_type(cls, parameter: str, expected: str) -> AbilityParameterError:
        return cls(f"Invalid type for parameter {parameter}. Expected {expected}.", parameter)


class AbilityExecutionError(AbilityError):
    """The ability ran and reported a domain failure (unknown order, over-refund, ...)."""


@dataclass(frozen=True, slots=True)
class AbilityParameter:
    name: str
    type: str = "string"
    required: bool = False


@dataclass(frozen=True, slots=True)
class AbilityMetadata:
    ability_id: str
    label: str
    description: str
    parameters: tuple[AbilityParameter, ...] = field(default_factory=tuple)
    is_destructive: bool = False

    @property
    def category(self) -> str:
        return ability_category(self.ability_id)


class AbilityRegistry(Protocol):
    vendor: str

    def describe(self, ability_id: str) -> AbilityMetadata | None: ...

    def execute(self, ability_id: str, params: dict[str, Any]) -> Any: ...


def ability_category(ability_id: str) -> str:
    """`shop/orders/refund` -> `orders`."""

    parts = ability_id.split("/")
    return parts[1] if len(parts) >= 2 else "general"


def ability_action(ability_id: str) -> str:
    """`shop/orders/refund` -> `refund`."""

    return ability_id.rsplit("/", 1)[-1]


_TYPE_CHECKS: dict[str, tuple[type, ...]] = {
    "string": (str,),
    "integer": (int,),
    "number": (int, float),
    "boolean": (bool,),
    "array": (list, tuple),
    "object": (dict,),
}


def validate_parameters(metadata: AbilityMetadata, params: dict[str, Any]) -> None:
    for parameter in metadata.parameters:
        if parameter.name not in params or params[parameter.name] is None:
            if parameter.required:
                raise AbilityParameterError.missing(parameter.name)
            continue

        value = params[parameter.name]
        expected = _TYPE_CHECKS.get(parameter.type)
        if expected is None:
            continue

        # bool is an int subclass; reject it for numeric parameters.
        if parameter.type in {"integer", "number"} and isinstance(value, bool):
            raise AbilityParameterError.invalid_type(parameter.name, parameter.type)
        if not isinstance(value, expected):
            raise AbilityParameterError.invalid_type(parameter.name, parameter.type)
