from enum import Enum

from argkit.errors import InvalidTokenError, MalformedEmbeddedArgumentError

# --- Scan -------------------------------------------------------------- #


class Scan:
    """
    A simple scanner over a single command-line token.
    """

    _src: str
    _off: int

    def __init__(self, src: str, off: int = 0):
        self._src = src
        self._off = off

    def curr(self) -> str:
        """
        Returns the current character, or '\0' at the end of the token.
        """
        if self.eof():
            return "\0"
        return self._src[self._off]

    def next(self) -> str:
        if self.eof():
            return "\0"

        self._off += 1
        return self.curr()

    def eof(self) -> bool:
        return self._off >= len(self._src)

    def skipWhile(self, c: str) -> int:
        """
        Skips over a run of the character `c`.

        Returns:
            The number of characters skipped.
        """
        n = 0
        while not self.eof() and self.curr() == c:
            self.next()
            n += 1
        return n

    def until(self, c: str) -> str:
        """Consumes and returns everything up to (excluding) `c`."""
        res = ""
        while not self.eof() and self.curr() != c:
            res += self.curr()
            self.next()
        return res

    def rest(self) -> str:
        """Consumes and returns the remainder of the token."""
        res = self._src[self._off :]
        self._off = len(self._src)
        return res


# --- Normalize --------------------------------------------------------- #


def stripDashes(token: str) -> str:
    """
    Removes the leading dashes of a token to recover the bare name.

    Raises:
        InvalidTokenError: The token is empty or made only of dashes.
    """
    if len(token) == 0:
        raise InvalidTokenError(token)

    s = Scan(token)
    s.skipWhile("-")
    if s.eof():
        raise InvalidTokenError(token)
    return s.rest()


# --- Classify ---------------------------------------------------------- #


class TokenKind(Enum):
    """
    How a normalized token is laid out.
    """

    ISOLATED = 0
    EMBEDDED = 1
    MALFORMED = 2


def classify(token: str) -> TokenKind:
    """Classifies a normalized token by the number of '=' it holds."""
    n = token.count("=")
    if n == 0:
        return TokenKind.ISOLATED
    elif n == 1:
        return TokenKind.EMBEDDED
    else:
        return TokenKind.MALFORMED


def isEmbedded(token: str) -> bool:
    """Checks if a normalized token is a single `name=value` pair."""
    return classify(token) == TokenKind.EMBEDDED


def splitEmbedded(token: str) -> tuple[str, str]:
    """
    Splits a normalized `name=value` token into its name and raw value.

    The value may be empty, the name may not.

    Raises:
        MalformedEmbeddedArgumentError: The token holds no '=', several '=',
            or nothing before the '='.
    """
    kind = classify(token)
    if kind == TokenKind.ISOLATED:
        raise MalformedEmbeddedArgumentError(token, "expected '='")
    if kind == TokenKind.MALFORMED:
        raise MalformedEmbeddedArgumentError(token, "more than one '='")

    s = Scan(token)
    name = s.until("=")
    s.next()
    if len(name) == 0:
        raise MalformedEmbeddedArgumentError(token, "expected a name before '='")
    return name, s.rest()
