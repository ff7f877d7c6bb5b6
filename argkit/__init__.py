import os
import sys
import logging

from typing import Optional

from . import const, vt100
from .errors import (
    ArgumentError,
    InvalidNameError,
    InvalidTokenError,
    MalformedEmbeddedArgumentError,
    TypeCoercionError,
    UnknownOptionError,
    UnrecognizedTypeError,
)
from .parser import Paired, ParsedArgument, Single, collect, parseArgs
from .schema import OptionName, Registry, ValueType, parseSchema
from .tokens import isEmbedded, stripDashes
from .values import (
    BoolValue,
    NoneValue,
    ParsedValue,
    StringValue,
    UsizeValue,
    coerce,
)

__all__ = [
    "ArgumentError",
    "BoolValue",
    "InvalidNameError",
    "InvalidTokenError",
    "MalformedEmbeddedArgumentError",
    "NoneValue",
    "OptionName",
    "Paired",
    "ParsedArgument",
    "ParsedValue",
    "Registry",
    "Single",
    "StringValue",
    "TypeCoercionError",
    "UnknownOptionError",
    "UnrecognizedTypeError",
    "UsizeValue",
    "ValueType",
    "coerce",
    "collect",
    "isEmbedded",
    "main",
    "parseArgs",
    "parseSchema",
    "stripDashes",
]

_logger = logging.getLogger(__name__)

USAGE = "[--schema=<name[:type],...>] [--verbose] [--version] -- <args...>"


class logger:
    @staticmethod
    def setup(verbose: bool):
        if verbose:
            logging.basicConfig(
                level=logging.DEBUG,
                format=f"{vt100.CYAN}%(asctime)s{vt100.RESET} {vt100.YELLOW}%(levelname)s{vt100.RESET} %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        else:
            logging.basicConfig(
                level=logging.WARNING,
                format="%(asctime)s %(levelname)s %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )


def _frontRegistry() -> Registry:
    res = Registry()
    res.register("schema", "string")
    res.register("verbose")
    res.register("version")
    return res


def _splitArgv(argv: list[str]) -> tuple[list[str], list[str]]:
    """Splits the front end's own options from the arguments after '--'."""
    if "--" not in argv:
        return argv, []
    idx = argv.index("--")
    return argv[:idx], argv[idx + 1 :]


def usage():
    print(f"Usage: {const.ARGV0} {USAGE}")


def main(argv: Optional[list[str]] = None) -> int:
    if argv is None:
        extra = os.environ.get(const.EXTRA_ARGS_ENV, None)
        argv = (extra.split(" ") if extra else []) + sys.argv[1:]

    try:
        own, rest = _splitArgv(argv)
        opts = collect(parseArgs(own, _frontRegistry()))

        if opts.get("version"):
            print(f"argkit v{const.VERSION_STR}")
            return 0

        logger.setup(bool(opts.get("verbose")))

        schema = opts.get("schema", "")
        if not isinstance(schema, str):
            vt100.warning("Expected a value for '--schema'")
            schema = ""

        registry = parseSchema(schema)
        _logger.debug(f"Using {registry!r}")
        if len(registry) == 0 and len(rest) > 0:
            vt100.warning("The schema is empty, every argument will be rejected")

        for arg in parseArgs(rest, registry):
            print(vt100.argument(arg))
        return 0

    except ArgumentError as e:
        _logger.debug("Failed to parse arguments", exc_info=e)
        vt100.error(str(e))
        usage()
        return 1

    except KeyboardInterrupt:
        print()
        return 1
