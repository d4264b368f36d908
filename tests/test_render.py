import io

from clinews import Article
from clinews.render import format_date, render_articles
from clinews.theme import Theme, default


def test_format_date():
    assert format_date("2023-05-01T10:00:00Z") == "01/05/2023"


def test_format_date_short_string_is_unchanged():
    assert format_date("2023") == "2023"


def test_render_plain():
    out = io.StringIO()
    articles = [Article(title="T", url="U", published_at="2023-05-01T10:00:00Z")]
    render_articles(articles, Theme(color=False, width=3), out)

    assert out.getvalue() == "Top Headlines\n01/05/2023\nT\nU\n───\n\n"


def test_render_empty_list_prints_heading_only():
    out = io.StringIO()
    render_articles([], Theme(color=False), out)
    assert out.getvalue() == "Top Headlines\n"


def test_colored_theme_wraps_spans():
    theme = Theme(color=True)
    line = theme.code_span("title")
    assert line.startswith(theme.code)
    assert "title" in line
    assert line.endswith("\033[0m")


def test_default_theme_respects_forced_color():
    assert default(color=False).color is False
    assert default(color=True).color is True


def test_api_strings_are_printed_verbatim():
    out = io.StringIO()
    title = "What the f*** and s*** happened to `main`"
    url = "https://x/a*b*c"
    render_articles([Article(title=title, url=url, published_at="2023-05-01T10:00:00Z")], Theme(color=False), out)

    lines = out.getvalue().split("\n")
    assert lines[2] == title
    assert lines[3] == url


def test_colored_spans_keep_text_intact():
    theme = Theme(color=True)
    assert theme.italic_span("a*b*c") == f"{theme.italic}a*b*c\033[0m"
    assert theme.code_span("`x`") == f"{theme.code}`x`\033[0m"
