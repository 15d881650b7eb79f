"""Environment and home-directory expansion for configured paths."""

from __future__ import annotations

import os
import re
from pathlib import Path

_VARIABLE_RE = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)\}|\$([A-Za-z_][A-Za-z0-9_]*)")


def expand_path(raw: str) -> str:
    """Expand ``$NAME``/``${NAME}`` tokens and a leading ``~`` in *raw*.

    Unset (or empty) variables are left in place as the literal token, so the
    function never raises. Only a ``~`` in first position means the home
    directory.
    """

    def _substitute(match: re.Match) -> str:
        name = match.group(1) or match.group(2)
        return os.environ.get(name) or match.group(0)

    expanded = _VARIABLE_RE.sub(_substitute, raw)
    if expanded.startswith("~"):
        expanded = str(Path.home()) + expanded[1:]
    return expanded
