import pytest

from adoc_kit.asciidoc.headers import HeaderMatch, end_of_line, parse_headers


class TestParseHeaders:
    def test_no_headers_returns_empty_list(self) -> None:
        assert parse_headers("Just some text.\nAnother line.") == []

    def test_empty_text(self) -> None:
        assert parse_headers("") == []

    @pytest.mark.parametrize("depth", [1, 2, 3, 4, 5, 6])
    def test_depth_is_marker_count(self, depth: int) -> None:
        text = "=" * depth + " Title\nbody\n"

        assert parse_headers(text) == [HeaderMatch(depth=depth, title="Title", offset=0)]

    def test_offsets_point_at_line_start(self) -> None:
        text = "= Doc\n\nintro\n== First\nbody\n=== Nested\n"

        headers = parse_headers(text)

        assert [h.offset for h in headers] == [0, 13, 27]
        assert all(text[h.offset] == "=" for h in headers)
        assert [h.title for h in headers] == ["Doc", "First", "Nested"]

    def test_offsets_strictly_increase(self) -> None:
        text = "\n".join(f"== Section {i}\ncontent {i}" for i in range(20))

        offsets = [h.offset for h in parse_headers(text)]

        assert offsets == sorted(set(offsets))
        assert len(offsets) == 20

    def test_title_whitespace_is_trimmed(self) -> None:
        headers = parse_headers("==\t  Spaced Title   \t\r\nbody")

        assert headers == [HeaderMatch(depth=2, title="Spaced Title", offset=0)]

    @pytest.mark.parametrize(
        "line",
        [
            "====",  # example block delimiter
            "==Title",  # no space after markers
            "==   ",  # no title
            " == Indented",  # markers must start the line
            "Text with == inside",
        ],
    )
    def test_non_header_lines(self, line: str) -> None:
        assert parse_headers(line + "\nbody") == []

    def test_markers_deeper_than_max_depth_are_body_text(self) -> None:
        text = "== Kept\n======= Too deep\n"

        assert parse_headers(text) == [HeaderMatch(depth=2, title="Kept", offset=0)]

    def test_max_depth_is_configurable(self) -> None:
        text = "= One\n== Two\n=== Three\n"

        assert [h.title for h in parse_headers(text, max_depth=2)] == ["One", "Two"]

    def test_header_on_last_line_without_newline(self) -> None:
        headers = parse_headers("body\n== Last")

        assert headers == [HeaderMatch(depth=2, title="Last", offset=5)]


class TestEndOfLine:
    def test_points_past_newline(self) -> None:
        assert end_of_line("ab\ncd", 0) == 3

    def test_last_line_ends_at_text_end(self) -> None:
        assert end_of_line("ab\ncd", 3) == 5
