"""Runtime values of paris language. Values are immutable: evaluation only ever creates new ones or shares existing
ones.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal

from paris.lang.error import TypeMismatch


class Value(ABC):
    """Superclass of every runtime value."""
    type_name = "value"

    @abstractmethod
    def render(self):
        """Canonical text rendering of this value, as written by display."""

    def __str__(self):
        return self.render()


@dataclass(frozen=True)
class StringValue(Value):
    text: str
    type_name = "string"

    def render(self):
        return self.text


@dataclass(frozen=True)
class NumberValue(Value):
    """All paris numbers are 64-bit floats."""
    number: float
    type_name = "number"

    def __post_init__(self):
        object.__setattr__(self, "number", float(self.number))

    def render(self):
        """Minimal decimal representation: '42' rather than '42.0', never exponent notation."""
        if self.number.is_integer():
            return str(int(self.number))
        return format(Decimal(repr(self.number)), "f")


@dataclass(frozen=True)
class BooleanValue(Value):
    flag: bool
    type_name = "boolean"

    def render(self):
        return "true" if self.flag else "false"


class UnitValue(Value):
    """Absence of a meaningful result, e.g. the result of an assignment. There is only ever one instance: UNIT."""
    type_name = "unit"
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def render(self):
        return ""

    def __repr__(self):
        return "UNIT"


UNIT = UnitValue()


def from_python(value):
    """Wraps a Python str, bool, int or float into the matching Value."""
    if isinstance(value, Value):
        return value
    elif isinstance(value, str):
        return StringValue(value)
    elif isinstance(value, bool):  # bool before int: bool is an int subclass
        return BooleanValue(value)
    elif isinstance(value, (int, float)):
        return NumberValue(value)
    raise TypeError(f"cannot convert {type(value).__name__} to a paris value")


def expect_type(value, expected, position=None):
    """Returns value if it is an instance of expected (a Value subclass), otherwise raises TypeMismatch."""
    if not isinstance(value, expected):
        raise TypeMismatch(expected.type_name, value.type_name, position)
    return value
