import sys

from argkit.parser import ParsedArgument, Single

RED = "\033[31m"
GREEN = "\033[32m"
CYAN = "\033[36m"
YELLOW = "\033[33m"

BOLD = "\033[1m"
RESET = "\033[0m"


def argument(arg: ParsedArgument) -> str:
    """Renders a parsed argument as `name` or `name = value` (value typed)."""
    if isinstance(arg, Single):
        return f"{BOLD}{arg.name}{RESET}"
    return f"{BOLD}{arg.name}{RESET} = {GREEN}{arg.value.value!r}{RESET} {CYAN}({arg.value.type}){RESET}"


def error(msg: str) -> None:
    print(f"{RED}Error:{RESET} {msg}\n", file=sys.stderr)


def warning(msg: str) -> None:
    print(f"{YELLOW}Warning:{RESET} {msg}\n", file=sys.stderr)
