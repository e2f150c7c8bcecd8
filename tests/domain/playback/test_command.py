"""Tests for player command construction."""

from radio_minion.domain.playback.command import (
    Literal,
    UrlPlaceholder,
    build_command,
    parse_template,
)


class TestBuildCommand:
    """Tests for build_command."""

    def test_placeholder_replaced_in_position(self) -> None:
        template = (Literal("mpv"), Literal("--a"), UrlPlaceholder(), Literal("--b"))
        assert build_command(template, "http://x/y") == ["mpv", "--a", "http://x/y", "--b"]

    def test_no_placeholder_never_includes_url(self) -> None:
        template = (Literal("mpv"), Literal("--idle"))
        result = build_command(template, "http://x/y")
        assert result == ["mpv", "--idle"]
        assert "http://x/y" not in result

    def test_every_placeholder_replaced(self) -> None:
        template = (UrlPlaceholder(), Literal("--"), UrlPlaceholder())
        assert build_command(template, "u") == ["u", "--", "u"]

    def test_empty_template(self) -> None:
        assert build_command((), "http://x/y") == []

    def test_literal_equal_to_url_text_kept(self) -> None:
        """A literal is copied verbatim even if it looks like a placeholder."""
        template = (Literal("{url}"), UrlPlaceholder())
        assert build_command(template, "http://s") == ["{url}", "http://s"]


class TestParseTemplate:
    """Tests for parse_template."""

    def test_default_placeholder(self) -> None:
        template = parse_template(["mpv", "--no-video", "{url}"])
        assert template == (Literal("mpv"), Literal("--no-video"), UrlPlaceholder())

    def test_custom_placeholder(self) -> None:
        template = parse_template(["vlc", "%URL%", "{url}"], placeholder="%URL%")
        assert template == (Literal("vlc"), UrlPlaceholder(), Literal("{url}"))

    def test_placeholder_must_match_whole_token(self) -> None:
        template = parse_template(["--stream={url}"])
        assert template == (Literal("--stream={url}"),)

    def test_parse_then_build(self) -> None:
        template = parse_template(["mpv", "--", "{url}"])
        assert build_command(template, "http://r") == ["mpv", "--", "http://r"]
