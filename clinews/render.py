from __future__ import annotations

from typing import Iterable, Optional, TextIO

from .models import Article
from .theme import Theme, default


def format_date(published_at: str) -> str:
    """
    Reformat "YYYY-MM-DDTHH:MM:SSZ" into "DD/MM/YYYY" by fixed slicing.

    Strings too short to hold a date are returned unchanged.
    """
    if len(published_at) < 10:
        return published_at
    return f"{published_at[8:10]}/{published_at[5:7]}/{published_at[0:4]}"


def render_articles(
    articles: Iterable[Article],
    theme: Optional[Theme] = None,
    out: Optional[TextIO] = None,
) -> None:
    theme = theme or default()
    theme.print_text(theme.heading("Top Headlines") + "\n", out)
    for a in articles:
        theme.print_text(f"{format_date(a.published_at)}\n", out)
        theme.print_text(theme.code_span(a.title) + "\n", out)
        theme.print_text(theme.italic_span(a.url) + "\n", out)
        theme.print_text(theme.rule() + "\n\n", out)
