"""
Core Roster Model Objects

Defines the data structures held by the account manager:
    - Record (one named officer and its roles)
    - Roster (all records, keyed by name)
    - RoleStore (current roster + header role list, swapped atomically)
    - DataSource / DataFormat (where data comes from, how it is encoded)

ARCHITECTURAL RULE:
    These objects:
        - Know nothing about fetching or listeners
        - Store every value as raw text (see tokens.py for interpretation)
        - Are replaced wholesale, never partially mutated
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from officer_roster.tokens import KEY_NOT_FOUND


class DataSource(Enum):
    """Where roster data is loaded from."""
    OFFLINE = "offline"  # bundled text blob
    REMOTE = "remote"    # fetched document


class DataFormat(Enum):
    """Expected encoding of the raw roster text."""
    CSV = "csv"
    JSON = "json"  # not implemented, parses to an empty roster


@dataclass
class Record:
    """
    One named officer.

    Properties:
        name:
            Row key (column 0 of the source row)

        roles:
            Role name -> raw cell text

    INVARIANT:
        roles never holds a value that parses as boolean false.
        Such cells are dropped at parse time, so "role absent" and
        "role explicitly false" are the same thing.
    """

    name: str
    roles: Dict[str, str] = field(default_factory=dict)

    def has_role(self, role: str) -> bool:
        return role in self.roles

    def get(self, role: str):
        """Raw token for a role, or KEY_NOT_FOUND."""
        return self.roles.get(role, KEY_NOT_FOUND)


@dataclass
class Roster:
    """
    The full parse result.

    Properties:
        records: Record name -> Record (names are unique)
        role_names: Header columns 1..N, in header order
    """

    records: Dict[str, Record] = field(default_factory=dict)
    role_names: List[str] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.records)

    def names(self) -> List[str]:
        return list(self.records.keys())


class RoleStore:
    """
    Holds the current Roster.

    The store is written only by the account manager and only via
    replace(). Readers always see either the old roster or the new one.
    """

    def __init__(self, roster: Optional[Roster] = None):
        self._roster = roster if roster is not None else Roster()

    @property
    def roster(self) -> Roster:
        return self._roster

    @property
    def records(self) -> Dict[str, Record]:
        return self._roster.records

    @property
    def role_names(self) -> List[str]:
        return self._roster.role_names

    def replace(self, roster: Roster) -> None:
        """Swap in a fully built roster."""
        self._roster = roster

    def lookup(self, name: str) -> Optional[Record]:
        """
        Retrieve a record by name.

        Returns:
            Record or None if not found
        """
        return self._roster.records.get(name)

    def is_known(self, name: str) -> bool:
        """True if a record with this name exists, regardless of its roles."""
        return name in self._roster.records

    def __len__(self) -> int:
        return len(self._roster)


__all__ = ["DataSource", "DataFormat", "Record", "Roster", "RoleStore"]
