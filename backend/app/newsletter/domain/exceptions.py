"""Domain-level exceptions raised while constructing value objects."""


class ValidationError(ValueError):
    """Raised when raw user input cannot become a domain value.

    Attributes:
        value: The offending raw value, exactly as submitted.
        reason: Human-readable description of what is wrong with it.
    """

    def __init__(self, value: str, reason: str) -> None:
        super().__init__(f"{value!r} {reason}")
        self.value = value
        self.reason = reason
