"""Selection results and the selector interface.

A selector shows the operator the loaded records and reports back either
`Cancelled` or `Chosen(identifiers)`. The pipeline depends only on this
contract; how the records are shown is up to each implementation.
"""
from __future__ import annotations

import abc
from dataclasses import dataclass
from typing import Any, Sequence, Tuple, Union


@dataclass(frozen=True)
class Cancelled:
    """The operator aborted the selection."""


@dataclass(frozen=True)
class Chosen:
    """Identifier values the operator chose to exclude (may be empty)."""
    identifiers: Tuple[Any, ...] = ()

    def __bool__(self) -> bool:
        return bool(self.identifiers)


SelectionResult = Union[Cancelled, Chosen]


class Selector(abc.ABC):
    """Interactive capability that picks records to exclude."""

    @abc.abstractmethod
    def select(self, records: Sequence[Any]) -> SelectionResult:
        raise NotImplementedError

