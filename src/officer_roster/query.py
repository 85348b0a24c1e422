"""
Query Engine: role dictionaries derived from a RoleStore.

Both operations scan every record. They are not cheap: build them once
after the roster is ready, do not rebuild them on every tick.

Neither operation fails on an unknown role; the result is just empty.
"""

import logging
import time
from typing import Dict, Union

from officer_roster.comparator import Comparator, compare
from officer_roster.model import RoleStore

logger = logging.getLogger(__name__)


def create_role_dict(store: RoleStore, role_name: str, timed: bool = False) -> Dict[str, str]:
    """
    Map every officer carrying ``role_name`` to its value.

    Officers without the role (including those whose cell was false)
    are skipped.
    """
    start = time.perf_counter() if timed else None

    result: Dict[str, str] = {}
    for name, record in store.records.items():
        if role_name in record.roles:
            result[name] = record.roles[role_name]

    if timed:
        logger.debug(
            "Creating role dict for '%s' took %.3fms",
            role_name, (time.perf_counter() - start) * 1000,
        )
    return result


def create_filtered_role_dict(
    store: RoleStore,
    role_name: str,
    comparator: Union[Comparator, str],
    value,
    timed: bool = False,
) -> Dict[str, str]:
    """
    Map officers whose ``role_name`` value satisfies the comparison.

    Example:
        create_filtered_role_dict(store, "Staff", Comparator.EQUAL_TO, True)

    Args:
        store: Role store to scan
        role_name: Role (header column) to test
        comparator: Comparator member or its symbol
        value: Operand (str, bool, int or float)
        timed: Log how long the scan took

    Returns:
        Officer name -> raw role value, for matching officers only.
        Officers lacking the role never match, whatever the comparator.
    """
    comparator = Comparator(comparator)
    start = time.perf_counter() if timed else None

    result: Dict[str, str] = {}
    if role_name not in store.role_names:
        logger.debug("Role '%s' is not in the header, nothing to filter", role_name)
    else:
        for name, record in store.records.items():
            token = record.get(role_name)
            if compare(token, value, comparator):
                result[name] = token

    if timed:
        logger.debug(
            "Creating filtered role dict for '%s' %s %r took %.3fms",
            role_name, comparator.value, value, (time.perf_counter() - start) * 1000,
        )
    return result


__all__ = ["create_role_dict", "create_filtered_role_dict"]
