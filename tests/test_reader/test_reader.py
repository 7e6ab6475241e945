"""End-to-end tests: chart text in, Chart out."""

import io
import logging
from pathlib import Path

import pytest

from knitchart import (
    BadHeaderLineError,
    BadStitchCharError,
    Chart,
    ChartError,
    ChartFormat,
    Color,
    Stitch,
    UnknownAttributeError,
    build_chart,
    open_chart,
    parse_chart,
    parse_header,
    read_chart,
)
from knitchart.attributes import resolve_attributes
from knitchart.parser import LineReader
from knitchart.reader import read_body

FIXTURES = Path(__file__).parent.parent / "fixtures"

K, P, E = Stitch.KNIT, Stitch.PURL, Stitch.EMPTY


def _rules(chart: Chart) -> list[str]:
    return [d.rule for d in chart.diagnostics]


# ---------------------------------------------------------------------------
# Fixture files
# ---------------------------------------------------------------------------


class TestPatternHeader:
    @pytest.fixture()
    def chart(self) -> Chart:
        return open_chart(FIXTURES / "pattern.chart")

    def test_attributes(self, chart: Chart) -> None:
        attrs = chart.attributes
        assert attrs.rows == 32
        assert attrs.columns == 64
        assert attrs.knit == " "
        assert attrs.purl == "X"
        assert attrs.empty == "#"

    def test_empty_body_is_padded(self, chart: Chart) -> None:
        assert chart.rows == 32
        assert chart.columns == 64
        assert all(s is K for _, _, s in chart.cells())
        assert _rules(chart).count("row_padded") == 32


class TestSeedChart:
    @pytest.fixture()
    def chart(self) -> Chart:
        return open_chart(FIXTURES / "seed.chart")

    def test_dimensions(self, chart: Chart) -> None:
        assert (chart.rows, chart.columns) == (4, 6)

    def test_no_diagnostics(self, chart: Chart) -> None:
        assert chart.diagnostics == ()

    def test_stitches(self, chart: Chart) -> None:
        assert chart.stitches[0] == (E, K, P, K, P, E)
        assert chart.stitches[1] == (E, P, K, P, K, E)

    def test_lines_after_body_terminator_ignored(self, chart: Chart) -> None:
        assert len(chart.stitches) == 4

    def test_decorations(self, chart: Chart) -> None:
        assert chart.background_color == Color(255, 255, 255, 255)
        assert chart.grid_color == Color(10, 20, 30, 255)
        assert chart.cell_size == 16.0
        assert chart.dot_size == 6.0


class TestShortChart:
    """Body has three lines while the header declares five rows."""

    @pytest.fixture()
    def chart(self) -> Chart:
        return open_chart(FIXTURES / "short.chart")

    def test_padded_to_declared_rows(self, chart: Chart) -> None:
        assert chart.rows == 5
        assert len(chart.stitches) == 5

    def test_padded_rows_are_knit(self, chart: Chart) -> None:
        assert chart.stitches[3] == (K, K, K, K)
        assert chart.stitches[4] == (K, K, K, K)

    def test_warnings(self, chart: Chart) -> None:
        assert _rules(chart) == ["too_few_rows", "row_padded", "row_padded"]
        assert all(d.is_warning for d in chart.diagnostics)


# ---------------------------------------------------------------------------
# Inline sources
# ---------------------------------------------------------------------------


class TestParseChart:
    def test_long_row_truncated(self):
        chart = parse_chart("columns=4\nCHART\n....\n..XX..X\n....\n")
        assert chart.columns == 4
        assert chart.stitches[1] == (K, K, P, P)
        assert _rules(chart) == ["row_truncated"]
        assert chart.diagnostics[0].row == 2

    def test_dimensions_inferred(self):
        chart = parse_chart("CHART\n.X\n.X.X\n")
        assert (chart.rows, chart.columns) == (2, 4)
        assert chart.stitches[0] == (K, P, K, K)

    def test_too_many_rows_kept(self):
        chart = parse_chart("rows=1\nCHART\nX\n.\n")
        assert chart.rows == 1
        assert len(chart.stitches) == 2
        assert _rules(chart) == ["too_many_rows"]
        assert [s for _, _, s in chart.cells()] == [P]

    def test_blank_body_line_is_a_row(self):
        chart = parse_chart("CHART\nXX\n\nXX\n")
        assert chart.rows == 3
        assert chart.stitches[1] == (K, K)

    def test_crlf_input(self):
        chart = parse_chart("rows=1\r\nCHART\r\nX.\r\n")
        assert chart.stitches == ((P, K),)

    def test_duplicate_markers_reported(self):
        chart = parse_chart("knit=o\npurl=o\nCHART\noo\n")
        assert chart.stitches == ((K, K),)
        assert _rules(chart) == ["duplicate_markers"]

    def test_custom_format(self):
        fmt = ChartFormat(header_terminator="BEGIN", body_terminator="END", comment_prefix="#")
        chart = parse_chart("# note\nrows=1\nBEGIN\nX.\nEND\nX\n", fmt=fmt)
        assert chart.stitches == ((P, K),)

    def test_read_chart_from_file_object(self):
        chart = read_chart(io.StringIO("CHART\nX\n"))
        assert chart.stitches == ((P,),)

    def test_debug_log(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="knitchart"):
            parse_chart("CHART\nX\n")
        assert any("Read chart: 1 rows x 1 columns" in r.getMessage() for r in caplog.records)


class TestMissingTerminator:
    def test_header_only(self):
        chart = parse_chart("rows=2\ncolumns=3\n")
        assert (chart.rows, chart.columns) == (2, 3)
        assert _rules(chart) == ["missing_terminator", "too_few_rows", "row_padded", "row_padded"]
        assert not chart.diagnostics[0].is_warning

    def test_bad_stitch_without_terminator(self):
        hdr = parse_header("knit=o\npurl=x\n")
        assert not hdr.terminated
        attrs = resolve_attributes(hdr)
        with pytest.raises(BadStitchCharError) as exc_info:
            build_chart(attrs, ["oxo", "o?x"])
        assert exc_info.value.char == "?"
        assert exc_info.value.line == 2

    def test_body_line_without_terminator_is_bad_header(self):
        with pytest.raises(BadHeaderLineError) as exc_info:
            parse_chart("rows=1\n..X\n")
        assert exc_info.value.line == 2


class TestErrors:
    def test_bad_stitch_char_line_number(self):
        with pytest.raises(BadStitchCharError) as exc_info:
            parse_chart("// header\nrows=2\nCHART\n..\n.Q\n")
        err = exc_info.value
        assert err.char == "Q"
        assert err.line == 5
        assert err.column == 2

    def test_unknown_attribute(self):
        with pytest.raises(UnknownAttributeError) as exc_info:
            parse_chart("colour=red\nCHART\n")
        assert exc_info.value.name == "colour"

    def test_all_errors_are_chart_errors(self):
        with pytest.raises(ChartError):
            parse_chart("rows=x\nCHART\n")

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            open_chart(tmp_path / "nope.chart")

    def test_invalid_utf8_file(self, tmp_path):
        path = tmp_path / "bad.chart"
        path.write_bytes(b"CHART\n\xff\n")
        with pytest.raises(ChartError) as exc_info:
            open_chart(path)
        assert exc_info.value.line == 2
        assert isinstance(exc_info.value.cause, UnicodeDecodeError)

    def test_invalid_utf8_stream(self):
        stream = io.TextIOWrapper(io.BytesIO(b"rows=1\nCHART\n\xff\n"), encoding="utf-8")
        with pytest.raises(ChartError) as exc_info:
            read_chart(stream)
        assert isinstance(exc_info.value.cause, UnicodeDecodeError)


class TestReadBody:
    def test_stops_at_body_terminator(self):
        reader = LineReader(["..\n", "OSAAT\n", "XX\n"])
        assert read_body(reader) == [".."]
        assert reader.line_number == 2

    def test_terminator_prefix_match(self):
        assert read_body(LineReader(["X\n", "OSAAT -- done\n"])) == ["X"]

    def test_keeps_trailing_spaces(self):
        assert read_body(LineReader([". .  \n"])) == [". .  "]
