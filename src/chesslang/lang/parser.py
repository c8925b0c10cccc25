"""Command parser: token list → command variant."""

from __future__ import annotations

from chesslang.core.errors import CommandParseError
from chesslang.lang.commands import CheckCommand, Command, MoveCommand, UndoCommand


def parse(tokens: list[str]) -> Command | None:
    """Turn *tokens* into a command.

    Returns ``None`` for an empty line. Rules are tried in order:
    ``move from X to Y`` (exactly five tokens), then any line starting with
    ``undo``, then any line starting with ``check``.

    Raises:
        CommandParseError: nothing matched.
    """
    if not tokens:
        return None

    head = tokens[0]
    if head == "move" and len(tokens) == 5 and tokens[1] == "from" and tokens[3] == "to":
        return MoveCommand(tokens[2], tokens[4])
    if head == "undo":
        return UndoCommand()
    if head == "check":
        return CheckCommand()
    raise CommandParseError(tokens)
