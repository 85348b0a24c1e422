"""
Officer Roster Package

Loads a roster of named officers from bundled CSV text or a remote
document, and serves typed lookups and filtered role dictionaries.

ARCHITECTURAL GUARANTEE:
------------------------
This package contains ZERO knowledge of:
    - UI rendering
    - Player/identity APIs (a name provider may be injected)
    - Network transport (a Fetcher is injected)

All values are stored as text and interpreted on read.
"""

import logging

from officer_roster.comparator import Comparator, compare
from officer_roster.config import ManagerConfig, load_config
from officer_roster.manager import AccountManager, InitState
from officer_roster.model import DataFormat, DataSource, Record, RoleStore, Roster
from officer_roster.tokens import KEY_NOT_FOUND

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "AccountManager",
    "InitState",
    "ManagerConfig",
    "load_config",
    "Comparator",
    "compare",
    "DataFormat",
    "DataSource",
    "Record",
    "RoleStore",
    "Roster",
    "KEY_NOT_FOUND",
]
