"""CLI command modules for agent-guidance."""

from .add import add
from .init import init
from .list_cmd import list_guides

__all__ = ["add", "init", "list_guides"]
