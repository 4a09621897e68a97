import sys
import json
from pathlib import Path
from dataclasses import dataclass
from typing import Any

import typer

__all__ = ["app", "app_state", "InputError"]

app = typer.Typer(
    invoke_without_command=True,
    context_settings={"help_option_names": ["-h", "--help"]},
    rich_markup_mode="rich",
)


class InputError(Exception):
    """Raised when the input is not a JSON array."""
    pass


@dataclass(slots=True)
class AppState:
    """
    Application state variables
    """
    input_path: Path = Path("-")
    verbose: bool = False

    def load(self) -> list[Any] | None:
        """
        Read the JSON array to work on, from stdin if the input path is ``-``.

        :return: The list, or None if the input is JSON null (an absent list)
        :raises InputError: If the input is not valid JSON or not an array
        """
        try:
            if str(self.input_path) == "-":
                data = json.load(sys.stdin)
            else:
                with self.input_path.open(encoding="utf-8") as f:
                    data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise InputError(f"Invalid JSON in {self.input_path}: {e}") from e
        except OSError as e:
            raise InputError(f"Cannot read {self.input_path}: {e}") from e

        if data is not None and not isinstance(data, list):
            raise InputError(f"Input must be a JSON array, got {type(data).__name__}")
        return data


app_state = AppState()
