"""
Tests for the CSV roster parser (Raw Text → Roster).

CSV format:
    name, <role 1>, ..., <role N>

We need to:
1. Take role names from header columns 1..N, in order
2. Store cells verbatim, keyed by header name
3. Drop cells that parse as boolean false
4. Tolerate short rows, CRLF and blank lines
5. Let the last duplicate row win
"""

import logging

import pytest
from officer_roster.csv_parser import (
    parse_roster,
    parse_roster_file,
    parse_roster_string,
    RosterParseError,
)
from officer_roster.model import DataFormat, Roster


SIMPLE_CSV = "name,Rank,Staff\nAda,Recruit,True\nLee,Recruit,False\n"


class TestHeader:
    """Test role name extraction."""

    def test_role_names_in_header_order(self):
        """Role names keep header order, name column excluded."""
        roster = parse_roster_string("name,Zeta,Alpha,Mid\nAda,1,2,3\n")
        assert roster.role_names == ["Zeta", "Alpha", "Mid"]

    def test_role_listed_even_if_nobody_carries_it(self):
        """A header role stays listed when every cell was false."""
        roster = parse_roster_string("name,Staff\nAda,False\nLee,false\n")
        assert roster.role_names == ["Staff"]
        assert all(not r.has_role("Staff") for r in roster.records.values())

    def test_header_only(self):
        """Header with no rows gives roles but no officers."""
        roster = parse_roster_string("name,Rank\n")
        assert roster.role_names == ["Rank"]
        assert len(roster) == 0

    def test_empty_input(self, caplog):
        """Empty text gives an empty roster and a warning."""
        with caplog.at_level(logging.WARNING):
            roster = parse_roster_string("")
        assert isinstance(roster, Roster)
        assert len(roster) == 0
        assert roster.role_names == []
        assert "empty" in caplog.text


class TestRecords:
    """Test record construction."""

    def test_simple_scenario(self):
        """Lee's false Staff cell is dropped."""
        roster = parse_roster_string(SIMPLE_CSV)
        assert roster.names() == ["Ada", "Lee"]
        assert roster.records["Ada"].roles == {"Rank": "Recruit", "Staff": "True"}
        assert roster.records["Lee"].roles == {"Rank": "Recruit"}

    def test_values_stored_verbatim(self):
        """Cells are stored untrimmed and uninterpreted."""
        roster = parse_roster_string("name,Hours,Note\nAda, 2 ,TRUE\n")
        assert roster.records["Ada"].roles == {"Hours": " 2 ", "Note": "TRUE"}

    def test_false_in_any_case_is_dropped(self):
        """False is recognised in any casing."""
        roster = parse_roster_string("name,A,B,C\nAda,FALSE,false,False\n")
        assert roster.records["Ada"].roles == {}

    def test_empty_cells_are_kept(self):
        """Empty cells are not boolean and are kept."""
        roster = parse_roster_string("name,Species,Rank\nMika,,Officer\n")
        assert roster.records["Mika"].roles == {"Species": "", "Rank": "Officer"}

    def test_blank_lines_ignored(self):
        """Blank lines anywhere are skipped."""
        roster = parse_roster_string("\nname,Rank\n\nAda,Recruit\n\n\nLee,Officer\n")
        assert roster.names() == ["Ada", "Lee"]

    def test_crlf_line_endings(self):
        """CRLF input parses like LF input."""
        roster = parse_roster_string("name,Rank,Staff\r\nAda,Recruit,True\r\nLee,Recruit,False\r\n")
        assert roster.role_names == ["Rank", "Staff"]
        assert roster.records["Ada"].roles == {"Rank": "Recruit", "Staff": "True"}
        assert roster.records["Lee"].roles == {"Rank": "Recruit"}

    def test_duplicate_name_last_wins(self, caplog):
        """Later duplicate row overwrites the earlier one."""
        with caplog.at_level(logging.WARNING):
            roster = parse_roster_string("name,Rank\nAda,Recruit\nAda,Sergeant\n")
        assert len(roster) == 1
        assert roster.records["Ada"].roles == {"Rank": "Sergeant"}
        assert "Duplicate" in caplog.text


class TestMalformedRows:
    """Lenient by default, strict on request."""

    def test_short_row_is_under_populated(self, caplog):
        """Missing trailing cells are simply absent."""
        with caplog.at_level(logging.WARNING):
            roster = parse_roster_string("name,Rank,Staff,Dev\nAda,Recruit\n")
        assert roster.records["Ada"].roles == {"Rank": "Recruit"}
        assert "Row 2" in caplog.text

    def test_name_only_row(self):
        """A row with just a name is an officer with no roles."""
        roster = parse_roster_string("name,Rank\nAda\n")
        assert roster.records["Ada"].roles == {}

    def test_long_row_extra_cells_ignored(self):
        """Cells past the header width are ignored."""
        roster = parse_roster_string("name,Rank\nAda,Recruit,Extra\n")
        assert roster.records["Ada"].roles == {"Rank": "Recruit"}

    def test_strict_rejects_short_row(self):
        """Strict mode raises on short rows."""
        with pytest.raises(RosterParseError):
            parse_roster_string("name,Rank,Staff\nAda,Recruit\n", strict=True)

    def test_strict_rejects_long_row(self):
        """Strict mode raises on long rows."""
        with pytest.raises(RosterParseError):
            parse_roster_string("name,Rank\nAda,Recruit,Extra\n", strict=True)

    def test_strict_rejects_duplicates(self):
        """Strict mode raises on duplicate names."""
        with pytest.raises(RosterParseError):
            parse_roster_string("name,Rank\nAda,A\nAda,B\n", strict=True)


class TestFormats:
    """Test format dispatch."""

    def test_csv_dispatch(self):
        """CSV format goes to the CSV parser."""
        roster = parse_roster(SIMPLE_CSV, DataFormat.CSV)
        assert len(roster) == 2

    def test_json_not_supported(self, caplog):
        """JSON format logs a warning and yields nothing."""
        with caplog.at_level(logging.WARNING):
            roster = parse_roster('{"Ada": {"Rank": "Recruit"}}', DataFormat.JSON)
        assert len(roster) == 0
        assert "not supported" in caplog.text


class TestFileHandling:
    """Test file I/O operations."""

    def test_parse_roster_file(self, tmp_path):
        """Parse a roster from an actual file."""
        csv_file = tmp_path / "roster.csv"
        csv_file.write_text(SIMPLE_CSV, encoding="utf-8")

        roster = parse_roster_file(str(csv_file))
        assert roster.names() == ["Ada", "Lee"]

    def test_missing_file(self, tmp_path):
        """Missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            parse_roster_file(str(tmp_path / "nope.csv"))
