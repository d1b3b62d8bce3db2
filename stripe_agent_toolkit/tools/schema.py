"""
Parameter Schemas
-----------------
Declarative per-tool parameter contracts.

A schema is a list of field specs (required/optional, primitive kind,
constraints). Validation is a pure function: schema x raw value ->
validated dict or ValidationError naming the offending field.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Sequence
import re

from ..core.errors import ValidationError


class ParameterType(str, Enum):
    """Supported parameter types."""
    STRING = "string"
    INTEGER = "integer"
    NUMBER = "number"
    BOOLEAN = "boolean"
    ARRAY = "array"
    OBJECT = "object"


_TYPE_MAP = {
    ParameterType.STRING: str,
    ParameterType.INTEGER: int,
    ParameterType.NUMBER: (int, float),
    ParameterType.BOOLEAN: bool,
    ParameterType.ARRAY: (list, tuple),
    ParameterType.OBJECT: dict,
}


def _matches_type(value: Any, expected: ParameterType) -> bool:
    # bool is an int subclass; never accept it where a number is expected
    if expected in (ParameterType.INTEGER, ParameterType.NUMBER) and isinstance(value, bool):
        return False
    return isinstance(value, _TYPE_MAP[expected])


@dataclass(frozen=True)
class ToolParameter:
    """Definition of a tool parameter."""
    name: str
    type: ParameterType
    description: str
    required: bool = True
    enum: Optional[Sequence[Any]] = None  # Allowed values
    min_value: Optional[float] = None
    max_value: Optional[float] = None
    min_length: Optional[int] = None
    pattern: Optional[str] = None  # Regex for strings
    items: Optional[ParameterType] = None  # Element type for arrays

    def to_json_schema(self) -> Dict[str, Any]:
        """Convert to JSON Schema format."""
        schema: Dict[str, Any] = {
            "type": self.type.value,
            "description": self.description,
        }

        if self.enum:
            schema["enum"] = list(self.enum)
        if self.min_value is not None:
            schema["minimum"] = self.min_value
        if self.max_value is not None:
            schema["maximum"] = self.max_value
        if self.min_length is not None:
            schema["minLength"] = self.min_length
        if self.pattern:
            schema["pattern"] = self.pattern
        if self.items is not None:
            schema["items"] = {"type": self.items.value}

        return schema

    def check(self, value: Any) -> None:
        """Raise ValidationError if value violates this parameter's constraints."""
        if not _matches_type(value, self.type):
            raise ValidationError(self.name, f"expected {self.type.value}")

        if self.enum is not None and value not in self.enum:
            raise ValidationError(self.name, "must be one of the allowed values")

        if self.type in (ParameterType.INTEGER, ParameterType.NUMBER):
            if self.min_value is not None and value < self.min_value:
                raise ValidationError(self.name, f"must be >= {self.min_value:g}")
            if self.max_value is not None and value > self.max_value:
                raise ValidationError(self.name, f"must be <= {self.max_value:g}")

        if self.type == ParameterType.STRING:
            if self.min_length is not None and len(value) < self.min_length:
                raise ValidationError(self.name, "must not be empty")
            if self.pattern and re.fullmatch(self.pattern, value) is None:
                raise ValidationError(self.name, "has an invalid format")

        if self.type == ParameterType.ARRAY and self.items is not None:
            for index, element in enumerate(value):
                if not _matches_type(element, self.items):
                    raise ValidationError(
                        f"{self.name}[{index}]", f"expected {self.items.value}"
                    )


@dataclass(frozen=True)
class ToolSchema:
    """Parameter contract for one tool."""
    parameters: Sequence[ToolParameter] = field(default_factory=tuple)

    def __post_init__(self):
        names = [p.name for p in self.parameters]
        if len(names) != len(set(names)):
            raise ValueError(f"Duplicate parameter names in schema: {names}")
        object.__setattr__(self, "parameters", tuple(self.parameters))

    @property
    def field_names(self) -> List[str]:
        return [p.name for p in self.parameters]

    def get(self, name: str) -> Optional[ToolParameter]:
        for param in self.parameters:
            if param.name == name:
                return param
        return None

    def validate(self, raw: Any) -> Dict[str, Any]:
        """
        Validate raw arguments against the schema.

        Returns a new dict holding only the supplied fields. Absent
        optional fields stay absent so later merge steps can tell
        "not supplied" apart from "explicitly empty".
        """
        if raw is None:
            raw = {}
        if not isinstance(raw, Mapping):
            raise ValidationError("$", "parameters must be an object")

        known = set(self.field_names)
        for name in raw:
            if name not in known:
                raise ValidationError(str(name), "unknown parameter")

        validated: Dict[str, Any] = {}
        for param in self.parameters:
            if param.name not in raw or raw[param.name] is None:
                if param.required:
                    raise ValidationError(param.name, "is required")
                continue

            value = raw[param.name]
            param.check(value)
            validated[param.name] = value

        return validated

    def without(self, *names: str) -> "ToolSchema":
        """Copy of this schema minus the named fields."""
        return replace(self, parameters=tuple(p for p in self.parameters if p.name not in names))

    def to_json_schema(self) -> Dict[str, Any]:
        """Convert to full JSON Schema."""
        properties = {}
        required = []

        for param in self.parameters:
            properties[param.name] = param.to_json_schema()
            if param.required:
                required.append(param.name)

        return {
            "type": "object",
            "properties": properties,
            "required": required,
            "additionalProperties": False,
        }

    def to_openai_function(self, name: str, description: str) -> Dict[str, Any]:
        """Convert to OpenAI function calling format."""
        return {
            "type": "function",
            "function": {
                "name": name,
                "description": description,
                "parameters": self.to_json_schema(),
            },
        }
