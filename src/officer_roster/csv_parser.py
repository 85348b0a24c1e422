"""
CSV Parser for roster data (Raw Text → Roster).

CSV Format:
    name, <role 1>, <role 2>, ..., <role N>
    Ada,  Recruit,  True,     ...

Syntax Notes:
    - Rows are split on newlines, empty lines are ignored
    - Cells are split on commas, verbatim (no quoting, no trimming)
    - Column 0 of the header is the name column and is not a role
    - A cell that parses as boolean false is omitted from its record
"""

import logging
from typing import Dict, List

from officer_roster.model import DataFormat, Record, Roster
from officer_roster.tokens import parse_bool

logger = logging.getLogger(__name__)

DELIMITER = ","


class RosterParseError(Exception):
    """Raised when strict parsing rejects a row."""
    pass


def _split_lines(raw: str) -> List[str]:
    """Split raw text into non-empty lines, tolerating CRLF."""
    lines = []
    for line in raw.split("\n"):
        if line.endswith("\r"):
            line = line[:-1]
        if line:
            lines.append(line)
    return lines


def _parse_record(cells: List[str], header: List[str], row_num: int, strict: bool) -> Record:
    name = cells[0]
    width = len(header)

    if len(cells) < width:
        msg = f"Row {row_num} ('{name}') has {len(cells)} cells, header has {width}"
        if strict:
            raise RosterParseError(msg)
        logger.warning("%s; missing roles left absent", msg)
    elif len(cells) > width:
        msg = f"Row {row_num} ('{name}') has {len(cells)} cells, header has {width}"
        if strict:
            raise RosterParseError(msg)
        logger.warning("%s; extra cells ignored", msg)
        cells = cells[:width]

    roles: Dict[str, str] = {}
    for j in range(1, len(cells)):
        value = cells[j]
        # Skip entries which parse to false
        if parse_bool(value) is False:
            continue
        roles[header[j]] = value

    return Record(name=name, roles=roles)


def parse_roster_string(raw: str, strict: bool = False) -> Roster:
    """
    Parse CSV roster text into a Roster.

    Args:
        raw: Raw roster text
        strict: Raise on short/long rows and duplicate names instead of
            logging a warning

    Returns:
        Roster with records and header role names

    Raises:
        RosterParseError: Only in strict mode
    """
    lines = _split_lines(raw or "")
    if not lines:
        logger.warning("Roster data is empty, no header row found")
        return Roster()

    header = lines[0].split(DELIMITER)
    role_names = header[1:]

    records: Dict[str, Record] = {}
    for row_num, line in enumerate(lines[1:], start=2):  # Header is line 1
        record = _parse_record(line.split(DELIMITER), header, row_num, strict)
        if record.name in records:
            msg = f"Duplicate officer name '{record.name}' on row {row_num}"
            if strict:
                raise RosterParseError(msg)
            logger.warning("%s; later row wins", msg)
        records[record.name] = record

    return Roster(records=records, role_names=role_names)


def parse_roster(raw: str, data_format: DataFormat = DataFormat.CSV, strict: bool = False) -> Roster:
    """Dispatch on data format."""
    if data_format == DataFormat.CSV:
        return parse_roster_string(raw, strict=strict)

    logger.warning("Data format %s is not supported, roster left empty", data_format.value)
    return Roster()


def parse_roster_file(filepath: str, strict: bool = False) -> Roster:
    """
    Parse a CSV roster file.

    Raises:
        FileNotFoundError: If file doesn't exist
        RosterParseError: Only in strict mode
    """
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            content = f.read()
    except FileNotFoundError:
        raise FileNotFoundError(f"Roster file not found: {filepath}")

    return parse_roster_string(content, strict=strict)


__all__ = [
    "parse_roster_string",
    "parse_roster_file",
    "parse_roster",
    "RosterParseError",
    "DELIMITER",
]
