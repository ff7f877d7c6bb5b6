import dataclasses as dt

from typing import ClassVar, Union

from argkit import const
from argkit.errors import TypeCoercionError
from argkit.schema import ValueType


@dt.dataclass(frozen=True)
class StringValue:
    value: str

    type: ClassVar[ValueType] = ValueType.STRING


@dt.dataclass(frozen=True)
class UsizeValue:
    value: int

    type: ClassVar[ValueType] = ValueType.USIZE


@dt.dataclass(frozen=True)
class BoolValue:
    value: bool

    type: ClassVar[ValueType] = ValueType.BOOL


@dt.dataclass(frozen=True)
class NoneValue:
    type: ClassVar[ValueType] = ValueType.NONE


ParsedValue = Union[StringValue, UsizeValue, BoolValue, NoneValue]


def _coerceUsize(raw: str) -> UsizeValue:
    digits = raw[1:] if raw.startswith("+") else raw
    # str.isdigit() also accepts non-ASCII digits, which int() would take.
    if len(digits) == 0 or not (digits.isascii() and digits.isdigit()):
        raise TypeCoercionError(raw, str(ValueType.USIZE))

    n = int(digits)
    if n > const.USIZE_MAX:
        raise TypeCoercionError(raw, str(ValueType.USIZE))
    return UsizeValue(n)


def _coerceString(raw: str) -> StringValue:
    return StringValue(raw)


def _coerceBool(raw: str) -> BoolValue:
    if raw == "true":
        return BoolValue(True)
    elif raw == "false":
        return BoolValue(False)
    raise TypeCoercionError(raw, str(ValueType.BOOL))


def coerce(raw: str, typ: ValueType) -> ParsedValue:
    """
    Converts a raw string to a value of the declared type.

    Args:
        raw: The string as it appeared on the command line.
        typ: The type declared for the option.

    Raises:
        TypeCoercionError: `raw` isn't a valid representation of `typ`.
    """
    match typ:
        case ValueType.USIZE:
            return _coerceUsize(raw)
        case ValueType.STRING:
            return _coerceString(raw)
        case ValueType.BOOL:
            return _coerceBool(raw)
        case ValueType.NONE:
            return NoneValue()
