"""Exception types raised by sevenday services."""


class SevenDayError(Exception):
    """Base class for sevenday errors."""


class ValidationError(SevenDayError, ValueError):
    """A field value was rejected.

    The caller keeps its unsaved input so the user can correct it.
    """

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")


class BlockValidationError(ValidationError):
    """One or more block fields are out of range."""

    def __init__(self, errors: dict[str, str]):
        self.errors = errors
        first_field = next(iter(errors))
        super().__init__(first_field, errors[first_field])

    def __str__(self) -> str:
        return "; ".join(f"{field}: {msg}" for field, msg in self.errors.items())


class BlockOverlapError(SevenDayError):
    """The block window intersects an existing block."""

    def __init__(self, conflicts: list):
        self.conflicts = conflicts
        super().__init__("This block overlaps with an existing block.")


class NotFoundError(SevenDayError):
    """A stored entry or block does not exist."""

    def __init__(self, kind: str, item_id: int):
        self.kind = kind
        self.item_id = item_id
        super().__init__(f"{kind.capitalize()} ID {item_id} not found")
