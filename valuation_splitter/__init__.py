"""Core logic for Valuation Splitter.

The Gradio UI lives in `app.py` and the command line entry point in `cli.py`.
This package contains the pieces that:
- load and validate a valuation export
- collect the operator's exclusions through a selector
- partition records into included / excluded
- write both halves next to the source file
"""

__version__ = '0.1.0'
