"""Action validation utilities."""

from ioaction.action.actions import Action, ActionKind, Composite


def _path(depth: int) -> str:
    return "action" + ".first" * depth


def validate_action(action: object) -> list[str]:
    """Validate the statically known part of an action chain.

    Only the `first` links of composites are inspected; whatever a
    continuation returns is decided at evaluation time.

    Returns a list of error strings. Empty list means valid.
    """
    errors: list[str] = []
    depth = 0
    current = action

    while isinstance(current, Composite):
        if not callable(current.next):
            errors.append(f"{_path(depth)}.next: continuation must be callable")
        current = current.first
        depth += 1

    if not isinstance(current, Action):
        errors.append(f"{_path(depth)}: expected an Action, got {type(current).__name__}")
        return errors

    kind = getattr(current, "kind", None)
    if kind not in set(ActionKind):
        errors.append(f"{_path(depth)}: unknown action kind {kind!r}")
    elif kind in (ActionKind.WRITE_LINE, ActionKind.WRAPPED):
        text = getattr(current, "text", None)
        if not isinstance(text, str):
            errors.append(f"{_path(depth)}.text: expected str, got {type(text).__name__}")

    return errors
