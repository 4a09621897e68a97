import json
from typing import Any, Callable

from typer import Argument, Option, Exit, secho, echo, colors

from ..app import app, app_state, InputError
from ...core.list_helper import ListHelper, OutOfRangeError
from ...types.na import na
from ...lib import log

__all__ = []

# Allows negative index arguments like `at -1`
_index_settings = {"ignore_unknown_options": True}


def _run(name: str, operation: Callable[[ListHelper], Any]) -> None:
    """
    Load the input list, run the operation on it and print the result as JSON.
    NA results are printed as ``null``.
    """
    try:
        sequence = app_state.load()
        if app_state.verbose:
            log.info("%s on %s", name, app_state.input_path)
        result = operation(ListHelper(sequence))
    except (InputError, OutOfRangeError) as e:
        secho(f"Error: {e}", err=True, fg=colors.RED)
        raise Exit(1)
    echo(json.dumps(None if na(result) else result))


@app.command(context_settings=_index_settings)
def at(index: int = Argument(..., help="Index of the element, negative counts from the end")):
    """
    Element at the index, null if out of range
    """
    _run("at", lambda helper: helper.at(index))


@app.command(context_settings=_index_settings)
def fetch(
        index: int = Argument(..., help="Index of the element"),
        default: str | None = Option(None, "--default", "-d", show_default=False,
                                     help="JSON value to print if the index is out of range"),
):
    """
    Element at the index, fails if out of range and no default is given
    """
    if default is None:
        _run("fetch", lambda helper: helper.fetch(index))
        return

    try:
        default_value = json.loads(default)
    except json.JSONDecodeError as e:
        secho(f"Error: Invalid JSON default value: {e}", err=True, fg=colors.RED)
        raise Exit(1)
    _run("fetch", lambda helper: helper.fetch(index, default_value))


@app.command()
def first():
    """
    First element, null if the list is empty
    """
    _run("first", lambda helper: helper.first())


@app.command()
def last():
    """
    Last element, null if the list is empty
    """
    _run("last", lambda helper: helper.last())


@app.command()
def take(n: int = Argument(..., help="Number of elements")):
    """
    The first N elements
    """
    _run("take", lambda helper: helper.take(n))


@app.command()
def drop(n: int = Argument(..., help="Number of elements to skip")):
    """
    All elements except the first N
    """
    _run("drop", lambda helper: helper.drop(n))


@app.command()
def size():
    """
    Size of the list, fails for null input
    """
    _run("size", lambda helper: helper.size())


@app.command()
def count():
    """
    Size of the list, 0 for null input
    """
    _run("count", lambda helper: helper.count())


@app.command()
def compact():
    """
    The list without null elements
    """
    _run("compact", lambda helper: helper.compact())
