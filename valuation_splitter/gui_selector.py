from __future__ import annotations

import logging
import queue
from typing import Any, Callable, List, Optional, Sequence, Tuple

import gradio as gr

from .config import DEFAULT_ID_FIELD
from .records import identifiers_at, summarize_record
from .selection import Cancelled, Chosen, SelectionResult, Selector

logger = logging.getLogger(__name__)


def build_choices(records: Sequence[Any], id_field: str = DEFAULT_ID_FIELD, summary_fields: Sequence[str] = ()) -> List[Tuple[str, int]]:
    """Checkbox choices as (label, index) pairs; rows refer back to records by position."""
    return [(summarize_record(record, id_field, summary_fields), index) for index, record in enumerate(records)]


def submit_selection(records: Sequence[Any], selected, id_field: str = DEFAULT_ID_FIELD) -> Chosen:
    indices: List[int] = []
    for value in selected or []:
        try:
            indices.append(int(value))
        except (TypeError, ValueError):
            logger.debug("Ignoring unexpected checkbox value %r", value)
    return Chosen(tuple(identifiers_at(records, indices, id_field)))


class BrowserSelector(Selector):
    """Checkbox list served by Gradio in the operator's browser.

    `select` blocks until the operator presses Split or Cancel, then shuts
    the server down.
    """

    def __init__(
        self,
        id_field: str = DEFAULT_ID_FIELD,
        summary_fields: Sequence[str] = (),
        server_port: Optional[int] = None,
        inbrowser: bool = True,
    ):
        self.id_field = id_field
        self.summary_fields = list(summary_fields)
        self.server_port = server_port
        self.inbrowser = inbrowser

    def build(self, records: Sequence[Any], deliver: Callable[[SelectionResult], None]) -> gr.Blocks:
        choices = build_choices(records, self.id_field, self.summary_fields)

        with gr.Blocks(title="Valuation Splitter") as demo:
            gr.Markdown("# Select properties to exclude")
            gr.Markdown(f"{len(records)} record(s) loaded. Tick every record that should go to the excluded file.")

            excluded_boxes = gr.CheckboxGroup(choices=choices, value=[], label="Records", type="value")
            with gr.Row():
                split_btn = gr.Button("Split", variant="primary")
                cancel_btn = gr.Button("Cancel", variant="stop")
            status_msg = gr.Markdown()

            def on_split(selected):
                result = submit_selection(records, selected, self.id_field)
                deliver(result)
                if not result:
                    return "No records selected. Nothing will be exported; you can close this tab."
                return f"{len(result.identifiers)} record(s) excluded. You can close this tab."

            def on_cancel():
                deliver(Cancelled())
                return "Cancelled. You can close this tab."

            split_btn.click(fn=on_split, inputs=[excluded_boxes], outputs=[status_msg])
            cancel_btn.click(fn=on_cancel, inputs=[], outputs=[status_msg])

        return demo

    def select(self, records: Sequence[Any]) -> SelectionResult:
        results: queue.Queue = queue.Queue(maxsize=1)

        def deliver(result: SelectionResult) -> None:
            try:
                results.put_nowait(result)
            except queue.Full:
                logger.debug("Selection already submitted; ignoring %r", result)

        demo = self.build(records, deliver)
        demo.launch(prevent_thread_lock=True, inbrowser=self.inbrowser, server_port=self.server_port, quiet=True)
        try:
            result = results.get()
        finally:
            demo.close()

        logger.info("Browser selection finished: %r", result)
        return result
