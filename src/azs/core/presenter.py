import base64
import sys
from collections.abc import Iterable, Mapping
from datetime import date, datetime
from typing import Any

import typer
from rich.console import Console

console_out = Console()
console_err = Console(stderr=True)


def to_serializable(value: Any) -> Any:
    """
    Converts Azure SDK models into plain JSON-friendly structures.

    SDK models such as ContainerProperties expose a dict-like interface without
    being Mappings, so anything with items() is treated as one. Binary values
    such as content_md5 are base64 encoded, the way the portal shows them.
    """
    if value is None or isinstance(value, str | int | float | bool):
        return value
    if isinstance(value, datetime | date):
        return value.isoformat()
    if isinstance(value, bytes | bytearray):
        return base64.b64encode(value).decode("ascii")
    if isinstance(value, Mapping) or hasattr(value, "items"):
        return {str(key): to_serializable(item) for key, item in value.items()}
    if isinstance(value, Iterable):
        return [to_serializable(item) for item in value]
    return str(value)


class ResultPresenter:
    """Prints the outcome of a single leaf command to stdout."""

    def __init__(self, result: Any):
        self.result = result

    def print(self):
        if self.result is None:
            return
        if isinstance(self.result, str):
            typer.echo(self.result, nl=False)
        elif isinstance(self.result, bytes):
            sys.stdout.buffer.write(self.result)
            sys.stdout.buffer.flush()
        else:
            self.print_json()

    def print_json(self):
        console_out.print_json(data=to_serializable(self.result), default=str)
