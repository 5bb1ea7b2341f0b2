"""Tests for query log line parsing."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from dnsquerylog.core.models import LogRecord
from dnsquerylog.core.parsing import parse_line

# Field values never contain the tab or newline separators
field_text = st.text(
    alphabet=st.characters(exclude_characters="\t\r\n"),
    max_size=20,
)


class TestParseLine:
    """Tests for parse_line()."""

    @pytest.mark.core
    @pytest.mark.tier(0)
    @pytest.mark.tra("Core.Parsing.Positional")
    def test_maps_fields_positionally(self) -> None:
        """Seven fields map to time, client, domain, type, server, latency, status."""
        record = parse_line("t1\t192.168.1.10\texample.com\tAAAA\tcloudflare\t12\tPASS")
        assert record == LogRecord(
            time="t1",
            client="192.168.1.10",
            domain="example.com",
            query_type="AAAA",
            server="cloudflare",
            latency="12",
            status="PASS",
        )

    @pytest.mark.core
    @pytest.mark.tier(0)
    @pytest.mark.tra("Core.Parsing.DefaultStatus")
    def test_status_defaults_to_ok_when_missing(self) -> None:
        """Six fields give a record with status OK."""
        record = parse_line("t1\tc1\texample.com\tA\tsrv1\t10")
        assert record is not None
        assert record.status == "OK"

    @pytest.mark.core
    @pytest.mark.tier(0)
    @pytest.mark.tra("Core.Parsing.DefaultStatus")
    def test_empty_status_field_is_kept(self) -> None:
        """A present but empty 7th field is not replaced by the default."""
        record = parse_line("t1\tc1\texample.com\tA\tsrv1\t10\t")
        assert record is not None
        assert record.status == ""

    @pytest.mark.core
    @pytest.mark.tier(0)
    @pytest.mark.tra("Core.Parsing.ShortLine")
    @pytest.mark.parametrize(
        "line",
        [
            "",
            "t1",
            "t1\tc1\texample.com\tA",
            "t1\tc1\texample.com\tA\tsrv1",
            "t1 c1 example.com A srv1 10 OK",
        ],
    )
    def test_short_lines_are_not_records(self, line: str) -> None:
        """Lines with fewer than six tab-separated fields return None."""
        assert parse_line(line) is None

    @pytest.mark.core
    @pytest.mark.tier(0)
    def test_strips_line_terminators(self) -> None:
        """Trailing newline and CRLF do not leak into the last field."""
        assert parse_line("t1\tc1\td\tA\ts\t10\tOK\n").status == "OK"
        assert parse_line("t1\tc1\td\tA\ts\t10\r\n").latency == "10"

    @pytest.mark.core
    @pytest.mark.tier(0)
    def test_extra_fields_are_ignored(self) -> None:
        """Fields after the seventh are dropped."""
        record = parse_line("t1\tc1\td\tA\ts\t10\tBLOCK\textra\tmore")
        assert record is not None
        assert record.status == "BLOCK"

    @pytest.mark.core
    @pytest.mark.tier(0)
    def test_values_are_not_reformatted(self) -> None:
        """Values are kept verbatim, including whitespace and odd tokens."""
        record = parse_line(" [2026-01-01 10:00:00] \t::1\tExample.COM.\tTYPE65\t-\t<1\tSYNTH")
        assert record is not None
        assert record.time == " [2026-01-01 10:00:00] "
        assert record.domain == "Example.COM."
        assert record.query_type == "TYPE65"
        assert record.latency == "<1"

    @pytest.mark.core
    @pytest.mark.tier(0)
    def test_record_is_immutable(self) -> None:
        """Parsed records cannot be modified."""
        record = parse_line("t1\tc1\td\tA\ts\t10")
        assert record is not None
        with pytest.raises(AttributeError):
            record.domain = "other"  # type: ignore[misc]

    @pytest.mark.core
    @pytest.mark.tier(0)
    @pytest.mark.tra("Core.Parsing.Positional")
    @given(fields=st.lists(field_text, min_size=6, max_size=7))
    def test_valid_lines_roundtrip_fields(self, fields: list[str]) -> None:
        """Any line with six or seven fields yields exactly those fields."""
        record = parse_line("\t".join(fields))
        assert record is not None
        assert [
            record.time,
            record.client,
            record.domain,
            record.query_type,
            record.server,
            record.latency,
        ] == fields[:6]
        expected_status = fields[6] if len(fields) == 7 else "OK"
        assert record.status == expected_status

    @pytest.mark.core
    @pytest.mark.tier(0)
    @pytest.mark.tra("Core.Parsing.ShortLine")
    @given(fields=st.lists(field_text, min_size=1, max_size=5))
    def test_short_lines_never_raise(self, fields: list[str]) -> None:
        """Any line with fewer than six fields returns None without raising."""
        assert parse_line("\t".join(fields)) is None

    @pytest.mark.core
    @pytest.mark.tier(0)
    @given(line=st.text())
    def test_arbitrary_text_never_raises(self, line: str) -> None:
        """parse_line accepts any string."""
        result = parse_line(line)
        assert result is None or isinstance(result, LogRecord)
