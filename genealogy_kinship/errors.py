"""Error taxonomy for kinship resolution.

An "unrelated" answer is a normal result, not an error. The exceptions here
cover rejected input only.
"""


class KinshipError(Exception):
    """Base class for all kinship engine errors."""


class InvalidQuery(KinshipError, ValueError):
    """A relationship query that cannot be answered.

    Raised when a person is compared with themselves, or when an identifier
    is not part of the family graph and the resolver runs in strict mode.
    """

    def __init__(self, message: str, person_a: str | None = None, person_b: str | None = None):
        super().__init__(message)
        self.person_a = person_a
        self.person_b = person_b


class InvalidEdge(KinshipError, ValueError):
    """A relationship record rejected before graph construction."""

    def __init__(self, message: str, index: int | None = None):
        if index is not None:
            message = f"Relationship record {index}: {message}"
        super().__init__(message)
        self.index = index
