import dataclasses as dt
import logging

from typing import Union

from argkit import tokens
from argkit.schema import OptionName, Registry, ValueType
from argkit.values import NoneValue, ParsedValue, coerce

_logger = logging.getLogger(__name__)


@dt.dataclass(frozen=True)
class Paired:
    """
    An option together with its value.

    Attributes:
        name: The option name.
        value: The coerced value, never a `NoneValue`.
    """

    name: OptionName
    value: ParsedValue

    def __str__(self) -> str:
        return f"{self.name} = {self.value.value}"


@dt.dataclass(frozen=True)
class Single:
    """
    An option that appeared without a value: a flag, or a valued option
    that was the last token.
    """

    name: OptionName

    def __str__(self) -> str:
        return str(self.name)


ParsedArgument = Union[Paired, Single]


def _emit(name: OptionName, value: ParsedValue) -> ParsedArgument:
    if isinstance(value, NoneValue):
        return Single(name)
    return Paired(name, value)


def parseArgs(args: list[str], registry: Registry) -> list[ParsedArgument]:
    """
    Parses a list of command-line tokens according to a registry.

    Tokens are either `--name=value`, or `--name` optionally followed by a
    value token. Any number of leading dashes is accepted, including none.

    Flags never take the following token as their value. A valued option
    that is the last token is returned as a `Single`.

    Raises:
        ArgumentError: On the first malformed token, unknown option, or
            value that doesn't fit its declared type.
    """
    res: list[ParsedArgument] = []
    idx = 0
    while idx < len(args):
        name = tokens.stripDashes(args[idx])

        if tokens.classify(name) != tokens.TokenKind.ISOLATED:
            rawName, rawValue = tokens.splitEmbedded(name)
            key = OptionName(rawName)
            arg = _emit(key, coerce(rawValue, registry.typeOf(key)))
            idx += 1
        else:
            key = OptionName(name)
            typ = registry.typeOf(key)
            if typ != ValueType.NONE and idx + 1 < len(args):
                arg = _emit(key, coerce(args[idx + 1], typ))
                idx += 2
            else:
                arg = Single(key)
                idx += 1

        _logger.debug(f"Parsed argument {arg!r}")
        res.append(arg)

    return res


def collect(args: list[ParsedArgument]) -> dict[str, str | int | bool]:
    """
    Folds parsed arguments into a mapping from option name to plain value.

    Flags map to True. When a name appears more than once the last one wins.
    """
    res: dict[str, str | int | bool] = {}
    for arg in args:
        if isinstance(arg, Single):
            res[arg.name.value] = True
        elif not isinstance(arg.value, NoneValue):
            res[arg.name.value] = arg.value.value
    return res
