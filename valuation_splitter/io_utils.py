from __future__ import annotations

import errno
import json
import os

from .errors import ParseError, ReadError


def _reject_constant(name: str):
    raise ParseError(f"{name} is not a valid JSON value")


def _loads(content: str):
    return json.loads(content, parse_constant=_reject_constant)


def read_json_content(file_obj):
    """Read JSON content from an uploaded file or file path.

    NaN and Infinity literals are rejected so every output stays valid JSON.
    """
    if file_obj is None:
        raise ValueError("No file uploaded.")

    try:
        if hasattr(file_obj, 'read'):
            if hasattr(file_obj, 'seek'):
                file_obj.seek(0)
            content = file_obj.read()
            if isinstance(content, bytes):
                content = content.decode('utf-8-sig')
            return _loads(content.lstrip('\ufeff'))

        if isinstance(file_obj, os.PathLike):
            path = os.fspath(file_obj)
        else:
            path = file_obj.name if hasattr(file_obj, 'name') else file_obj
        if not os.path.isfile(path):
            raise FileNotFoundError(errno.ENOENT, "No such file", path)
        try:
            with open(path, 'r', encoding='utf-8-sig') as f:
                content = f.read()
        except FileNotFoundError:
            raise
        except OSError as e:
            raise ReadError(path, e) from e
        return _loads(content)
    except UnicodeDecodeError as e:
        raise ParseError(f"File is not valid UTF-8: {e}") from e
    except json.JSONDecodeError as e:
        raise ParseError(f"Invalid JSON at line {e.lineno}, column {e.colno}: {e.msg}") from e
