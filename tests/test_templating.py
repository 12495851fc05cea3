"""Tests for titlecascade.templating — kida globals and filters."""

from kida import Environment

from titlecascade.binding import TitleBinding
from titlecascade.config import TitleConfig
from titlecascade.context import set_title_part, title_scope
from titlecascade.templating import cascade, page_title, register_title_globals, title_tag


def _make_env() -> Environment:
    return register_title_globals(Environment(autoescape=True))


class TestHelpers:
    def test_page_title(self) -> None:
        set_title_part(0, "Root")
        set_title_part(1, "Page")
        assert page_title() == "Page • Root"

    def test_page_title_fallback(self) -> None:
        with title_scope(TitleConfig(fallback="My App")):
            assert page_title() == "My App"

    def test_title_tag_escapes(self) -> None:
        set_title_part(0, "R&D")
        assert str(title_tag()) == "<title>R&amp;D</title>"

    def test_cascade_filter(self) -> None:
        parts = [{"level": 0, "title": "Docs"}, {"level": 1, "title": "API"}]
        assert cascade(parts) == "API • Docs"
        assert cascade(parts, " / ") == "API / Docs"


class TestEnvironment:
    def test_title_tag_in_template(self) -> None:
        env = _make_env()
        with TitleBinding("My App", level=0), TitleBinding("Settings", level=1):
            html = env.from_string("<head>{{ title_tag() }}</head>").render()
        assert html == "<head><title>Settings • My App</title></head>"

    def test_page_title_is_escaped(self) -> None:
        env = _make_env()
        set_title_part(0, "<b>Root</b>")
        html = env.from_string('<meta content="{{ page_title() }}">').render()
        assert "<b>" not in html
        assert "&lt;b&gt;Root" in html

    def test_cascade_filter_in_template(self) -> None:
        env = _make_env()
        tpl = env.from_string('{{ parts | cascade(" | ") }}')
        html = tpl.render(parts=[{"level": 0, "title": "A"}, {"level": 1, "title": "B"}])
        assert html == "B | A"

    def test_renders_per_scope(self) -> None:
        env = _make_env()
        tpl = env.from_string("{{ title_tag() }}")
        with title_scope():
            set_title_part(0, "First")
            first = tpl.render()
        with title_scope():
            set_title_part(0, "Second")
            second = tpl.render()
        assert first == "<title>First</title>"
        assert second == "<title>Second</title>"
