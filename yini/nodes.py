"""Typed value nodes for YINI documents."""

from __future__ import annotations

import sys
from decimal import Decimal
from typing import Annotated, Any, Literal, NoReturn, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

TRUTHY_STRINGS = {"true", "yes", "on", "1"}


class ConversionError(ValueError):
    def __init__(self, source: str, target: str, detail: str | None = None):
        message = f"Cannot convert {source} to {target}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.source = source
        self.target = target


def check_int_digits(value: int) -> int:
    """Reject integers too long to be written back as decimal text."""
    limit = sys.get_int_max_str_digits()
    if limit and abs(value) >= 10**limit:
        raise ConversionError("int", "decimal text", f"more than {limit} digits")
    return value


def format_float(value: float) -> str:
    """Shortest round-tripping fixed-point text for ``value``, always with a ``.``."""
    text = repr(value)
    if text in {"inf", "-inf", "nan"}:
        return text
    if "e" in text:
        text = format(Decimal(text), "f")
    if "." not in text:
        text += ".0"
    return text


class Value(BaseModel):
    model_config = ConfigDict(strict=True)

    kind: str
    data: Any

    def __init__(self, data: Any = None, /, **kwargs: Any) -> None:
        if data is not None:
            kwargs["data"] = data
        super().__init__(**kwargs)

    def _fail(self, target: str, detail: str | None = None) -> NoReturn:
        raise ConversionError(self.kind, target, detail)

    def is_string(self) -> bool:
        return isinstance(self, StringValue)

    def is_int(self) -> bool:
        return isinstance(self, IntValue)

    def is_float(self) -> bool:
        return isinstance(self, FloatValue)

    def is_bool(self) -> bool:
        return isinstance(self, BoolValue)

    def is_array(self) -> bool:
        return isinstance(self, ArrayValue)

    def as_string(self) -> str:
        self._fail("string")

    def as_int(self) -> int:
        self._fail("int")

    def as_float(self) -> float:
        self._fail("float")

    def as_bool(self) -> bool:
        self._fail("bool")

    def as_array(self) -> list[Value]:
        self._fail("array")

    def to_python(self) -> Any:
        return self.data


class StringValue(Value):
    kind: Literal["string"] = "string"
    data: str

    def as_string(self) -> str:
        return self.data

    def as_int(self) -> int:
        try:
            return int(self.data)
        except ValueError:
            self._fail("int", repr(self.data))

    def as_float(self) -> float:
        try:
            return float(self.data)
        except ValueError:
            self._fail("float", repr(self.data))

    def as_bool(self) -> bool:
        return self.data.lower() in TRUTHY_STRINGS


class IntValue(Value):
    kind: Literal["int"] = "int"
    data: int

    @field_validator("data")
    @classmethod
    def _fits_decimal_text(cls, value: int) -> int:
        return check_int_digits(value)

    def as_string(self) -> str:
        return str(self.data)

    def as_int(self) -> int:
        return self.data

    def as_float(self) -> float:
        try:
            return float(self.data)
        except OverflowError:
            self._fail("float", "integer too large")

    def as_bool(self) -> bool:
        return self.data != 0


class FloatValue(Value):
    kind: Literal["float"] = "float"
    data: float

    def as_string(self) -> str:
        return format_float(self.data)

    def as_int(self) -> int:
        try:
            return int(self.data)
        except (OverflowError, ValueError):
            self._fail("int", repr(self.data))

    def as_float(self) -> float:
        return self.data


class BoolValue(Value):
    kind: Literal["bool"] = "bool"
    data: bool

    def as_string(self) -> str:
        return "true" if self.data else "false"

    def as_bool(self) -> bool:
        return self.data


class ArrayValue(Value):
    kind: Literal["array"] = "array"
    data: list[YiniValue] = Field(default_factory=list)

    def as_array(self) -> list[Value]:
        return list(self.data)

    def to_python(self) -> list[Any]:
        return [item.to_python() for item in self.data]


YiniValue = Annotated[
    Union[StringValue, IntValue, FloatValue, BoolValue, ArrayValue],
    Field(discriminator="kind"),
]

ArrayValue.model_rebuild()


def to_value(obj: Any) -> Value:
    if isinstance(obj, Value):
        return obj
    if isinstance(obj, bool):
        return BoolValue(obj)
    if isinstance(obj, int):
        return IntValue(check_int_digits(obj))
    if isinstance(obj, float):
        return FloatValue(obj)
    if isinstance(obj, str):
        return StringValue(obj)
    if isinstance(obj, (list, tuple)):
        return ArrayValue([to_value(item) for item in obj])
    raise ConversionError(type(obj).__name__, "value")


__all__ = [
    "ArrayValue",
    "BoolValue",
    "ConversionError",
    "FloatValue",
    "IntValue",
    "StringValue",
    "Value",
    "YiniValue",
    "check_int_digits",
    "format_float",
    "to_value",
]
