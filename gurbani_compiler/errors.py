"""Error types raised while compiling the corpus."""


class CompilerError(Exception):
    """Base class for fatal compilation errors.

    Carries the entity type and identifier of the offending record so the
    caller can locate it in the store.
    """

    def __init__(self, message: str, entity: str = "", identifier: object = None) -> None:
        super().__init__(message)
        self.entity = entity
        self.identifier = identifier


class DecodeError(CompilerError):
    """An encoded field could not be decoded."""


class RetrievalError(CompilerError):
    """The store failed to return rows for a stage."""


class IntegrityWarning(UserWarning):
    """A bani line group whose members are not contiguous in line order."""

    def __init__(self, bani: str, line_group: object, missing: int) -> None:
        super().__init__(
            f"Bani {bani!r} line group {line_group!r} has {missing} "
            "line(s) inside its range that are not members"
        )
        self.bani = bani
        self.line_group = line_group
        self.missing = missing
