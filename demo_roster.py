"""
Demo: Load a roster, initialize the account manager and print a report.

Usage:
    python demo_roster.py                 # bundled example roster
    python demo_roster.py roster.csv      # offline CSV file
    python demo_roster.py config.yaml     # full YAML configuration
"""

import logging
import sys

from officer_roster import AccountManager, Comparator, ManagerConfig, load_config
from officer_roster.analyzer import analyze_roster
from officer_roster.examples import EXAMPLE_ROSTER_CSV
from officer_roster.logging_setup import configure_logging


def print_report(report):
    """Pretty-print a RosterReport."""
    print()
    print("=" * 70)
    print("ROSTER REPORT")
    print("=" * 70)
    print()

    print("📊 BASIC METRICS")
    print(f"  Total Officers:        {report.total_officers}")
    print(f"  Roles:                 {', '.join(report.role_names) or 'None'}")
    print(f"  Avg Roles/Officer:     {report.avg_roles_per_officer:.2f}")
    print()

    print("📈 ROLE CARRIERS")
    for role in report.role_names:
        print(f"  {role}: {report.role_carriers[role]} ({report.carrier_percent(role):.1f}%)")
    print()

    if report.warnings:
        print("⚠️  WARNINGS")
        for i, warning in enumerate(report.warnings, 1):
            print(f"  {i}. {warning}")
    else:
        print("✨ NO WARNINGS - Roster looks clean!")
    print()


def build_config(argv):
    if len(argv) < 2:
        return ManagerConfig(offline_data=EXAMPLE_ROSTER_CSV)
    path = argv[1]
    if path.endswith((".yaml", ".yml")):
        return load_config(path)
    with open(path, "r", encoding="utf-8") as f:
        return ManagerConfig(offline_data=f.read())


if __name__ == "__main__":
    configure_logging(logging.DEBUG)

    manager = AccountManager(build_config(sys.argv))
    manager.initialize()

    print_report(analyze_roster(manager.store))

    staff = manager.create_filtered_role_dict("Staff", Comparator.EQUAL_TO, True)
    print(f"Staff list has {len(staff)} entries")

    recruits = manager.create_filtered_role_dict("Rank", Comparator.EQUAL_TO, "LPD Recruit")
    if len(manager.store):
        percent = len(recruits) / len(manager.store)
        print(f"{len(recruits)} of {len(manager.store)} officers are recruits. That's {percent:.1%}!")

    devs = sorted(manager.create_filtered_role_dict("Dev", Comparator.EQUAL_TO, True))
    print("The devs are:" + "".join(f"\n  {name}" for name in devs))
