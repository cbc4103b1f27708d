"""Parameter classification and command-line helpers.

A parameter is *required* when a command line must spell it out: it has a
name, the name is not ``filler``, and its kind is not ``A`` (auxiliary).
Required parameters become mandatory snippet slots in completions; optional
ones are offered as extra completions.
"""

from __future__ import annotations

from collections.abc import Iterable

from mibscope.mib.models import ParamEntry


def is_required_param(name: str | None, kind: str | None = None) -> bool:
    if not name or name.lower() == "filler":
        return False
    if not kind:
        return True
    return kind.upper() != "A"


def partition_params(
    params: Iterable[ParamEntry],
) -> tuple[list[ParamEntry], list[ParamEntry]]:
    """Split parameters into ``(required, optional)``, keeping order."""
    required: list[ParamEntry] = []
    optional: list[ParamEntry] = []
    for param in params:
        (required if is_required_param(param.name, param.kind) else optional).append(param)
    return required, optional


def param_completion_keys(params: Iterable[ParamEntry], *, required: bool) -> list[str]:
    """Unique, ordered keys (param id, else name) of one partition."""
    keys: dict[str, None] = {}
    for param in params:
        if is_required_param(param.name, param.kind) != required:
            continue
        key = param.identifier
        if key:
            keys.setdefault(key)
    return list(keys)


def get_telecommand_token_from_line(line: str) -> str | None:
    """First whitespace-delimited token of a line, or None when blank."""
    parts = line.split()
    return parts[0] if parts else None
