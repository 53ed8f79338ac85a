from __future__ import annotations

import logging
import re
from typing import Any, Callable, List, Optional, Sequence

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from .config import DEFAULT_ID_FIELD
from .records import identifiers_at, summarize_record
from .selection import Cancelled, Chosen, SelectionResult, Selector

logger = logging.getLogger(__name__)

CANCEL_TOKENS = {'q', 'quit', 'cancel'}

PROMPT = "Enter the numbers of the records to EXCLUDE, separated by commas (blank for none, q to cancel): "

# ASCII digits only: int() would also take '1_0', '+1' and non-Latin digits.
_INDEX_TOKEN = re.compile(r'[0-9]+')


def parse_indices(text: str) -> List[int]:
    """Parse `"0, 2,5"` into indices; tokens that are not plain digits are dropped."""
    indices: List[int] = []
    for token in text.split(','):
        token = token.strip()
        if not token:
            continue
        if _INDEX_TOKEN.fullmatch(token):
            indices.append(int(token))
        else:
            logger.debug("Ignoring non-numeric selection token %r", token)
    return indices


def parse_selection(text: Optional[str], records: Sequence[Any], id_field: str = DEFAULT_ID_FIELD) -> SelectionResult:
    """Turn one line of operator input into a selection result.

    Out-of-range and non-numeric tokens are ignored rather than rejected, so
    `"5, abc"` against three records is an empty choice.
    """
    if text is None:
        return Cancelled()
    if text.strip().lower() in CANCEL_TOKENS:
        return Cancelled()

    indices = parse_indices(text)
    for index in indices:
        if not 0 <= index < len(records):
            logger.debug("Ignoring out-of-range selection index %d", index)
    return Chosen(tuple(identifiers_at(records, indices, id_field)))


def build_menu_table(records: Sequence[Any], id_field: str = DEFAULT_ID_FIELD, summary_fields: Sequence[str] = ()) -> Table:
    table = Table(
        title=f"{len(records)} record(s) loaded",
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    table.add_column("#", justify="right", style="bold cyan", no_wrap=True)
    table.add_column("RECORD", no_wrap=False, max_width=120)

    for index, record in enumerate(records):
        table.add_row(str(index), Text(summarize_record(record, id_field, summary_fields)))
    return table


class TextMenuSelector(Selector):
    """Numbered table on the terminal; the operator types indices to exclude."""

    def __init__(
        self,
        id_field: str = DEFAULT_ID_FIELD,
        summary_fields: Sequence[str] = (),
        console: Optional[Console] = None,
        input_fn: Optional[Callable[[str], str]] = None,
    ):
        self.id_field = id_field
        self.summary_fields = list(summary_fields)
        self.console = console or Console()
        self.input_fn = input_fn or self.console.input

    def select(self, records: Sequence[Any]) -> SelectionResult:
        self.console.print(build_menu_table(records, self.id_field, self.summary_fields))

        try:
            text = self.input_fn(PROMPT)
        except EOFError:
            text = None

        result = parse_selection(text, records, self.id_field)
        if isinstance(result, Chosen):
            logger.info("Operator chose %d identifier(s) to exclude", len(result.identifiers))
        else:
            logger.info("Operator cancelled the selection")
        return result
