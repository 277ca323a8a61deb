"""Entry-point selection: pick which matched files seed the expansion."""

from __future__ import annotations

import re
from typing import Callable, List, Optional, Sequence

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt

from .models import MatchInfo

Selector = Callable[[Sequence[MatchInfo]], List[str]]


def select_all(matches: Sequence[MatchInfo]) -> List[str]:
    """Non-interactive selector: every matched file becomes an entry."""
    return [m.file for m in matches]


def parse_selection(raw: str, count: int) -> List[int]:
    """Turn '0, 2,5' into valid, de-duplicated indices below ``count``."""
    picked: List[int] = []
    for part in re.split(r"\s*,\s*", raw.strip()):
        if not part.isdigit():
            continue
        index = int(part)
        if index < count and index not in picked:
            picked.append(index)
    return picked


def prompt_selection(
    matches: Sequence[MatchInfo],
    console: Optional[Console] = None,
    ask: Optional[Callable[[str], str]] = None,
) -> List[str]:
    """List the matches and ask for a comma separated set of indices."""
    console = console or Console(stderr=True)
    for i, m in enumerate(matches):
        lines = ",".join(str(n) for n in m.lines)
        console.print(f"[cyan][{i}][/cyan] {escape(m.file)} [dim]({lines})[/dim]")

    if ask is None:
        def ask(prompt: str) -> str:
            return Prompt.ask(prompt, console=console, default="", show_default=False)

    raw = ask("Select entry files (comma separated numbers)")
    return [matches[i].file for i in parse_selection(raw or "", len(matches))]
