from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Sequence

from .config import DEFAULT_ID_FIELD
from .errors import StructureError
from .io_utils import read_json_content

logger = logging.getLogger(__name__)


def resolve_records(data: Any) -> List[Any]:
    """Normalize parsed JSON into a list of records; a lone object becomes a one-item list."""
    if data is None:
        return []
    if isinstance(data, list):
        return data
    return [data]


def validate_records(records: Sequence[Any], id_field: str = DEFAULT_ID_FIELD) -> None:
    """Reject a collection whose first record has no identifier.

    Only the first record is inspected. Later records without the field are
    accepted and will never match an exclusion.
    """
    if not records:
        raise StructureError(f"missing required identifier field {id_field!r}: the file contains no records")
    first = records[0]
    if not isinstance(first, dict) or id_field not in first:
        raise StructureError(f"missing required identifier field {id_field!r} in the first record")


def load_records(file_obj, id_field: str = DEFAULT_ID_FIELD) -> List[Any]:
    """Load a valuation export from a path or uploaded file.

    Raises FileNotFoundError, ParseError or StructureError; nothing is
    written in any case.
    """
    data = read_json_content(file_obj)
    records = resolve_records(data)
    validate_records(records, id_field)
    logger.info("Loaded %d record(s) from %s", len(records), getattr(file_obj, 'name', file_obj))
    return records


def has_identifier(record: Any, id_field: str = DEFAULT_ID_FIELD) -> bool:
    return isinstance(record, dict) and id_field in record


def identifier_key(value: Any):
    """Hashable key giving JSON value equality for identifiers.

    Python treats True == 1 and would collapse them in a set; JSON does not.
    Numbers compare by value so 1 and 1.0 are the same identifier.
    """
    if isinstance(value, bool):
        return ('boolean', value)
    if isinstance(value, (int, float)):
        return ('number', value)
    if isinstance(value, str):
        return ('string', value)
    if value is None:
        return ('null', None)
    return ('json', json.dumps(value, sort_keys=True))


def get_field(record: Any, path: str) -> Any:
    """Look up a dotted path inside nested objects; None when any step is missing."""
    current = record
    for part in path.split('.'):
        if not isinstance(current, dict) or part not in current:
            return None
        current = current[part]
    return current


def summarize_record(record: Any, id_field: str = DEFAULT_ID_FIELD, summary_fields: Sequence[str] = ()) -> str:
    """One-line label used by the selectors, e.g. `1042 | Address: 5 Elm St`."""
    if not isinstance(record, dict):
        return json.dumps(record, ensure_ascii=False)

    parts: List[str] = [str(record.get(id_field, '(no id)'))]
    for path in summary_fields:
        if path == id_field:
            continue
        value = get_field(record, path)
        if value is None:
            continue
        if isinstance(value, (dict, list)):
            value = json.dumps(value, ensure_ascii=False)
        parts.append(f"{path}: {value}")
    return ' | '.join(parts)


def identifiers_at(records: Sequence[Any], indices, id_field: str = DEFAULT_ID_FIELD) -> List[Any]:
    """Map display indices to identifier values, de-duplicated, in first-seen order."""
    seen: Dict[Any, None] = {}
    chosen: List[Any] = []
    for index in indices:
        if not 0 <= index < len(records):
            continue
        record = records[index]
        if not has_identifier(record, id_field):
            continue
        value = record[id_field]
        key = identifier_key(value)
        if key in seen:
            continue
        seen[key] = None
        chosen.append(value)
    return chosen
