from enum import Enum
import dataclasses as dt
import logging

from typing import Iterator, Optional

from argkit.errors import InvalidNameError, UnknownOptionError, UnrecognizedTypeError

_logger = logging.getLogger(__name__)


class ValueType(Enum):
    """
    The closed set of value types an option can declare.

    The enum value is the keyword used to declare the type, `NONE` marks a
    flag that takes no value and has no keyword.
    """

    STRING = "string"
    USIZE = "usize"
    BOOL = "bool"
    NONE = None

    @staticmethod
    def fromKeyword(keyword: Optional[str]) -> "ValueType":
        """
        Maps a declaration keyword to a value type.

        Args:
            keyword: One of "string", "usize", "bool", or None for a flag.

        Raises:
            UnrecognizedTypeError: The keyword isn't a supported type.
        """
        for typ in ValueType:
            if typ.value == keyword:
                return typ
        raise UnrecognizedTypeError(str(keyword))

    def __str__(self) -> str:
        return self.value or "none"


@dt.dataclass(frozen=True)
class OptionName:
    """
    The bare name of an option, as registered in a schema.

    Attributes:
        value: A non-empty string without leading dashes and without '='.
    """

    value: str

    def __post_init__(self):
        if len(self.value) == 0 or self.value.startswith("-") or "=" in self.value:
            raise InvalidNameError(self.value)

    def __str__(self) -> str:
        return self.value


class Registry:
    """
    Maps option names to their declared value types.

    A registry is built up front with `register` and then handed to the
    parser, which only reads from it. Registering a name twice keeps the
    last declared type.
    """

    _types: dict[OptionName, ValueType]

    def __init__(self):
        self._types = {}

    def register(self, name: str, declaredType: Optional[str] = None) -> OptionName:
        """
        Declares an option.

        Args:
            name: The bare option name (e.g., "count" for "--count").
            declaredType: "usize", "string", "bool", or None for a flag.

        Returns:
            The validated option name.
        """
        key = OptionName(name)
        typ = ValueType.fromKeyword(declaredType)
        if key in self._types and self._types[key] != typ:
            _logger.debug(
                f"Redeclaring argument '{key}' as {typ} (was {self._types[key]})"
            )
        else:
            _logger.debug(f"Registering argument '{key}' as {typ}")
        self._types[key] = typ
        return key

    def typeOf(self, name: OptionName | str) -> ValueType:
        """
        Looks up the declared type of an option.

        Raises:
            UnknownOptionError: The name was never registered.
        """
        key = name.value if isinstance(name, OptionName) else name
        typ = self._types.get(OptionName(key)) if self._isValidName(key) else None
        if typ is None:
            raise UnknownOptionError(key)
        return typ

    def copy(self) -> "Registry":
        res = Registry()
        res._types = dict(self._types)
        return res

    @staticmethod
    def _isValidName(name: str) -> bool:
        return len(name) > 0 and not name.startswith("-") and "=" not in name

    def __contains__(self, name: object) -> bool:
        if isinstance(name, str):
            return self._isValidName(name) and OptionName(name) in self._types
        return name in self._types

    def __iter__(self) -> Iterator[OptionName]:
        return iter(self._types)

    def __len__(self) -> int:
        return len(self._types)

    def __repr__(self) -> str:
        entries = ", ".join(f"{k}: {v}" for k, v in self._types.items())
        return f"Registry({entries})"


def parseSchema(text: str, registry: Optional[Registry] = None) -> Registry:
    """
    Builds a registry from a compact description such as
    "count:usize,name:string,verbose".

    Entries are separated by commas, a missing ":type" declares a flag.
    Entries are registered into `registry` when one is given, otherwise
    into a new registry.
    """
    res = registry if registry is not None else Registry()
    for entry in text.split(","):
        entry = entry.strip()
        if len(entry) == 0:
            continue
        name, sep, keyword = entry.partition(":")
        res.register(name.strip(), keyword.strip() if sep else None)
    return res
