"""
Roster Analyzer — read-only diagnostics for a loaded roster.

Provides:
    - Record and role inventory
    - Per-role carrier counts (officers holding a non-false value)
    - Roles no officer carries
    - Warning flags (empty roster, unused roles)

It does NOT modify the store.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

from officer_roster.model import RoleStore


@dataclass
class RosterReport:
    """Summary of a loaded roster."""

    total_officers: int = 0
    role_names: List[str] = field(default_factory=list)

    # Role usage
    role_carriers: Dict[str, int] = field(default_factory=dict)
    unused_roles: List[str] = field(default_factory=list)
    avg_roles_per_officer: float = 0.0

    warnings: List[str] = field(default_factory=list)

    def add_warning(self, msg: str) -> None:
        if msg not in self.warnings:
            self.warnings.append(msg)

    def carrier_percent(self, role: str) -> float:
        """Share of officers carrying ``role``, 0-100."""
        if self.total_officers == 0:
            return 0.0
        return self.role_carriers.get(role, 0) / self.total_officers * 100


def analyze_roster(store: RoleStore) -> RosterReport:
    """Build a RosterReport for the store's current roster."""
    report = RosterReport(
        total_officers=len(store),
        role_names=list(store.role_names),
    )

    report.role_carriers = {role: 0 for role in store.role_names}
    total_roles = 0
    for record in store.records.values():
        total_roles += len(record.roles)
        for role in record.roles:
            if role in report.role_carriers:
                report.role_carriers[role] += 1

    report.unused_roles = [role for role, count in report.role_carriers.items() if count == 0]
    if report.total_officers:
        report.avg_roles_per_officer = total_roles / report.total_officers

    if report.total_officers == 0:
        report.add_warning("Roster is empty")
    if report.unused_roles:
        report.add_warning(f"Roles carried by no officer: {', '.join(report.unused_roles)}")

    return report


__all__ = ["RosterReport", "analyze_roster"]
