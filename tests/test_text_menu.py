"""
Unit Tests for the numbered text-menu selector.
"""

import pytest

from valuation_splitter.selection import Cancelled, Chosen
from valuation_splitter.text_menu import TextMenuSelector, build_menu_table, parse_indices, parse_selection


class TestParseSelection:
    """Tests for parse_selection."""

    def test_parse_when_valid_indices_then_maps_to_identifiers(self, sample_records):
        assert parse_selection("1", sample_records) == Chosen((2,))
        assert parse_selection(" 2 ,0", sample_records) == Chosen((3, 1))

    @pytest.mark.parametrize("text", ["q", "Q", "quit", " Cancel "])
    def test_parse_when_cancel_token_then_cancelled(self, sample_records, text):
        assert parse_selection(text, sample_records) == Cancelled()

    def test_parse_when_empty_input_then_empty_choice(self, sample_records):
        assert parse_selection("", sample_records) == Chosen(())
        assert parse_selection("  ", sample_records) == Chosen(())

    def test_parse_when_out_of_range_and_non_numeric_then_ignored(self, sample_records):
        assert parse_selection("5, abc", sample_records) == Chosen(())

    def test_parse_when_mixed_tokens_then_keeps_valid_ones(self, sample_records):
        assert parse_selection("0, x, -1, 2, 2", sample_records) == Chosen((1, 3))

    @pytest.mark.parametrize("text", ["1_0", "+1", "\u0663", "1.0", "0x1", " 1 0 "])
    def test_parse_when_token_is_not_plain_digits_then_ignored(self, text):
        records = [{"Valuation_ID": i} for i in range(12)]
        assert parse_selection(text, records) == Chosen(())

    def test_parse_when_none_then_cancelled(self, sample_records):
        assert parse_selection(None, sample_records) == Cancelled()

    def test_parse_indices_when_blank_tokens_then_skipped(self):
        assert parse_indices("1,,2, ,x, 007") == [1, 2, 7]


class TestTextMenuSelector:

    def test_select_when_input_given_then_shows_table_and_returns_choice(self, sample_records, make_console):
        console = make_console()
        prompts = []

        def answer(prompt):
            prompts.append(prompt)
            return "0"

        selector = TextMenuSelector(summary_fields=["X"], console=console, input_fn=answer)

        assert selector.select(sample_records) == Chosen((1,))
        shown = console.file.getvalue()
        assert "3 record(s) loaded" in shown
        for line in ("1 | X: a", "2 | X: b", "3 | X: c"):
            assert line in shown
        assert len(prompts) == 1

    def test_select_when_eof_then_cancelled(self, sample_records, make_console):
        def raise_eof(prompt):
            raise EOFError

        selector = TextMenuSelector(console=make_console(), input_fn=raise_eof)
        assert selector.select(sample_records) == Cancelled()

    def test_select_when_no_input_fn_then_reads_from_console(self, make_console):
        console = make_console()
        selector = TextMenuSelector(console=console)
        assert selector.input_fn == console.input


class TestBuildMenuTable:

    def test_table_when_records_then_one_row_per_record(self):
        records = [{"Valuation_ID": i} for i in range(11)]
        table = build_menu_table(records)
        assert table.row_count == 11
        assert [c.header for c in table.columns] == ["#", "RECORD"]

    def test_table_when_summary_has_brackets_then_rendered_literally(self, make_console):
        console = make_console()
        console.print(build_menu_table([{"Valuation_ID": "[bold]x[/bold]"}]))
        assert "[bold]x[/bold]" in console.file.getvalue()
