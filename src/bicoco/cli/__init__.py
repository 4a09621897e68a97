from .app import app, app_state
from . import commands  # noqa: F401 (registers the commands)

__all__ = ["app", "app_state"]
