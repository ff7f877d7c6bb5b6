class ArgumentError(ValueError):
    """
    Base class for every error raised while declaring a schema or parsing
    a token sequence.
    """

    pass


class InvalidNameError(ArgumentError):
    """Raised when an option name is empty, dash-prefixed, or contains '='."""

    name: str

    def __init__(self, name: str):
        self.name = name
        if len(name) == 0:
            reason = "it is empty"
        elif name.startswith("-"):
            reason = "it starts with '-'"
        else:
            reason = "it contains '='"
        super().__init__(f"Invalid option name '{name}': {reason}")


class UnrecognizedTypeError(ArgumentError):
    """Raised when a schema declares an unsupported type keyword."""

    type: str

    def __init__(self, type: str):
        self.type = type
        super().__init__(f"Unrecognized argument type '{type}'")


class UnknownOptionError(ArgumentError):
    """Raised when a token names an option that is not in the registry."""

    name: str

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown argument '{name}'")


class TypeCoercionError(ArgumentError):
    """Raised when a raw value can't be converted to the declared type."""

    raw: str
    type: str

    def __init__(self, raw: str, type: str):
        self.raw = raw
        self.type = type
        super().__init__(f"Unable to parse {type} from '{raw}'")


class MalformedEmbeddedArgumentError(ArgumentError):
    """Raised for a bare '=', an empty name before '=', or several '='."""

    token: str

    def __init__(self, token: str, reason: str):
        self.token = token
        super().__init__(f"Malformed argument '{token}': {reason}")


class InvalidTokenError(ArgumentError):
    """Raised for an empty token or a token made only of dashes."""

    token: str

    def __init__(self, token: str):
        self.token = token
        if len(token) == 0:
            super().__init__("Unexpected empty argument")
        else:
            super().__init__(f"Expected a name after '{token}'")
