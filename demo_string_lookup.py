"""
Demo: Show one officer's value for a role once the roster is ready.

Usage:
    python demo_string_lookup.py [name] [role]
"""

import sys

from officer_roster import AccountManager, ManagerConfig
from officer_roster.examples import EXAMPLE_ROSTER_CSV
from officer_roster.logging_setup import configure_logging


class StringLookup:
    """Prints the local player's value for a role when notified."""

    name = "StringLookup"

    def __init__(self, manager, role_name="Species"):
        self.manager = manager
        self.role_name = role_name
        self.text = ""

    def on_roster_ready(self):
        # Default is "" if the officer or role doesn't exist
        self.text = self.manager.get_string(self.manager.local_player(), self.role_name)
        print(f"{self.role_name}: {self.text!r}")


if __name__ == "__main__":
    configure_logging()

    player = sys.argv[1] if len(sys.argv) > 1 else "Ada"
    role = sys.argv[2] if len(sys.argv) > 2 else "Species"

    manager = AccountManager(ManagerConfig(offline_data=EXAMPLE_ROSTER_CSV), local_player=lambda: player)
    lookup = StringLookup(manager, role)
    manager.notify_when_initialized(lookup, "on_roster_ready")
    manager.initialize()
