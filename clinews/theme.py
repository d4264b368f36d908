from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Optional, TextIO

_RESET = "\033[0m"


@dataclass
class Theme:
    """
    Small ANSI styler for terminal output.

    Span helpers take text verbatim: no markup is interpreted, so API strings
    containing `*` or backticks are printed as-is. With color disabled the
    helpers return the text unchanged.
    """
    header: str = "\033[1;33m"
    code: str = "\033[1;37;44m"
    italic: str = "\033[3;36m"
    rule_style: str = "\033[2m"
    color: bool = True
    width: int = 40

    def _wrap(self, style: str, text: str) -> str:
        return f"{style}{text}{_RESET}" if self.color else text

    def heading(self, text: str) -> str:
        return self._wrap(self.header, text)

    def code_span(self, text: str) -> str:
        return self._wrap(self.code, text)

    def italic_span(self, text: str) -> str:
        return self._wrap(self.italic, text)

    def rule(self) -> str:
        return self._wrap(self.rule_style, "─" * self.width)

    def print_text(self, text: str, out: Optional[TextIO] = None) -> None:
        (out or sys.stdout).write(text)


def default(color: Optional[bool] = None) -> Theme:
    """Default theme. Color is on only when stdout is a terminal, unless forced."""
    if color is None:
        color = sys.stdout.isatty()
    return Theme(color=color)
