"""Tests for titlecascade.sinks — HeadTitle rendering."""

from titlecascade.binding import TitleBinding
from titlecascade.sinks import HeadTitle, TitleSink


class TestHeadTitle:
    def test_records_latest(self) -> None:
        head = HeadTitle()
        head("One")
        head("Two")
        assert head.title == "Two"
        assert head.history == ("One", "Two")

    def test_fallback_before_update(self) -> None:
        assert HeadTitle(fallback="My App").title == "My App"

    def test_fallback_when_cascade_empty(self) -> None:
        head = HeadTitle(fallback="My App")
        head("Page")
        head("")
        assert head.title == "My App"

    def test_render(self) -> None:
        head = HeadTitle()
        head("My App")
        assert str(head.render()) == "<title>My App</title>"

    def test_render_empty(self) -> None:
        assert str(HeadTitle().render()) == "<title></title>"

    def test_render_escapes(self) -> None:
        head = HeadTitle()
        head("Tom & Jerry <3")
        assert str(head.render()) == "<title>Tom &amp; Jerry &lt;3</title>"

    def test_html_protocol(self) -> None:
        head = HeadTitle()
        head("Home")
        assert head.__html__() == "<title>Home</title>"

    def test_history_is_bounded(self) -> None:
        head = HeadTitle(history_size=3)
        for n in range(10):
            head(f"Page {n}")
        assert head.history == ("Page 7", "Page 8", "Page 9")
        assert head.title == "Page 9"

    def test_default_history_size(self) -> None:
        head = HeadTitle()
        for n in range(100):
            head(str(n))
        assert len(head.history) == 32

    def test_satisfies_protocol(self) -> None:
        sink: TitleSink = HeadTitle()
        sink("x")


class TestServerRender:
    """A server render mounts bindings once and reads the head afterwards."""

    def test_root_only(self) -> None:
        head = HeadTitle()
        with TitleBinding("My App", level=0, sink=head):
            assert str(head.render()) == "<title>My App</title>"

    def test_root_and_page(self) -> None:
        head = HeadTitle()
        with TitleBinding("My App", level=0, sink=head), TitleBinding("Dashboard", level=1):
            assert str(head.render()) == "<title>Dashboard • My App</title>"

    def test_override(self) -> None:
        head = HeadTitle()
        with TitleBinding("Override Title", override=True, sink=head):
            assert str(head.render()) == "<title>Override Title</title>"

    def test_never_renders_undefined(self) -> None:
        head = HeadTitle()
        with TitleBinding("", level=0, sink=head):
            rendered = str(head.render())
        assert rendered == "<title></title>"
        assert "None" not in rendered
