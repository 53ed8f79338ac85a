from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Sequence, Tuple

from .config import DEFAULT_ID_FIELD
from .records import has_identifier, identifier_key

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Partition:
    """Records kept and records removed, each in original order."""
    included: Tuple[Any, ...]
    excluded: Tuple[Any, ...]


def partition(records: Sequence[Any], identifiers: Iterable[Any], id_field: str = DEFAULT_ID_FIELD) -> Partition:
    """Split records by whether their identifier is in `identifiers`.

    Single stable pass; the input is not modified. Identifiers that match no
    record are ignored, and records without the identifier field always land
    in `included`.
    """
    wanted = {identifier_key(value) for value in identifiers}
    included = []
    excluded = []

    for record in records:
        if wanted and has_identifier(record, id_field) and identifier_key(record[id_field]) in wanted:
            excluded.append(record)
        else:
            included.append(record)

    logger.info("Partitioned %d record(s): %d included, %d excluded", len(records), len(included), len(excluded))
    return Partition(included=tuple(included), excluded=tuple(excluded))
