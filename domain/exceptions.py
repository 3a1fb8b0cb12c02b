"""Builder-specific exceptions."""


class BuilderError(Exception):
    """Base exception for content-type and taxonomy builder errors."""

    pass


class ReservedIdentifierError(BuilderError, ValueError):
    """Raised when an identifier is reserved by the host platform."""

    def __init__(self, identifier: str, kind: str) -> None:
        self.identifier = identifier
        self.kind = kind
        super().__init__(f"Defined {kind} key {identifier!r} is prohibited. Use another!")


class IdentifierTooLongError(BuilderError, ValueError):
    """Raised when an identifier exceeds the maximum length for its kind."""

    def __init__(self, identifier: str, kind: str, max_length: int) -> None:
        self.identifier = identifier
        self.kind = kind
        self.max_length = max_length
        super().__init__(
            f"The defined {kind} key {identifier!r} has more than {max_length} characters ({len(identifier)})."
        )


class HostNotConfiguredError(BuilderError, RuntimeError):
    """Raised when register() is called without a host and no default host is set."""

    pass


class RegistrationConflictError(BuilderError):
    """Raised by a host when an identifier is already registered."""

    pass
