"""Exceptions raised while building sealed pools."""

from pathlib import Path
from typing import Optional, Union


class SealedPoolError(Exception):
    """Base class for every failure that aborts a run."""


class CatalogReadError(SealedPoolError):
    """The card catalog could not be read from disk."""

    def __init__(self, path: Union[str, Path], reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Could not read card catalog {self.path}: {reason}")


class MalformedCatalogError(SealedPoolError):
    """The catalog is not a JSON array of card objects."""


class MalformedCardError(MalformedCatalogError):
    """A single catalog entry failed to parse into a Card."""

    def __init__(self, index: int, reason: str) -> None:
        self.index = index
        self.reason = reason
        super().__init__(f"Malformed card at index {index}: {reason}")


class EmptyCandidateListError(SealedPoolError):
    """Cards were requested from a side with no eligible cards."""

    def __init__(self, side: Optional[str], requested: int) -> None:
        self.side = side
        self.requested = requested
        label = f"{side} " if side else ""
        super().__init__(
            f"Cannot draw {requested} cards: the {label}candidate list is empty"
        )


class PoolWriteError(SealedPoolError):
    """A pool listing could not be written."""

    def __init__(self, path: Union[str, Path], reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Could not write pool to {self.path}: {reason}")
