"""
Account Manager: initialization controller and consumer-facing surface.

State machine:

    IDLE --initialize()--> INITIALIZING --(offline | fetch ok)--> READY
                                        --(fetch failed)-------> FAILED_BUT_READY

Both READY and FAILED_BUT_READY are "ready": the roster is parsed and
queryable. FAILED_BUT_READY means the remote fetch failed and the offline
text was used instead.

CONCURRENCY:
    The host delivers one event at a time. initialize() is guarded by the
    INITIALIZING state only; this is NOT a lock and is not safe under real
    threads.
"""

import logging
import time
from enum import Enum
from typing import Any, Callable, Dict, Optional, Tuple, Union

from officer_roster.comparator import Comparator
from officer_roster.config import ManagerConfig
from officer_roster.csv_parser import RosterParseError, parse_roster
from officer_roster.fetch import Fetcher, RequestsFetcher
from officer_roster.listeners import ListenerRegistry, invoke
from officer_roster.model import DataSource, RoleStore
from officer_roster.query import create_filtered_role_dict, create_role_dict
from officer_roster.tokens import (
    KEY_NOT_FOUND,
    TYPE_DEFAULTS,
    parse_bool,
    parse_float,
    parse_int,
)

logger = logging.getLogger(__name__)


class InitState(Enum):
    IDLE = "idle"
    INITIALIZING = "initializing"
    READY = "ready"
    FAILED_BUT_READY = "failed_but_ready"


class AccountManager:
    """
    Loads the officer roster and serves lookups.

    Args:
        config: ManagerConfig (source, format, URL, offline text)
        fetcher: Fetch collaborator for REMOTE source; defaults to a
            RequestsFetcher using config.fetch_timeout_s
        local_player: Optional callable returning the local player's
            display name, used by the *_local_* conveniences
    """

    def __init__(
        self,
        config: Optional[ManagerConfig] = None,
        fetcher: Optional[Fetcher] = None,
        local_player: Optional[Callable[[], str]] = None,
    ):
        self.config = config if config is not None else ManagerConfig()
        self.fetcher = fetcher if fetcher is not None else RequestsFetcher(timeout_s=self.config.fetch_timeout_s)
        self.local_player = local_player

        self.raw_data: str = self.config.offline_data
        self.current_source: DataSource = DataSource.OFFLINE
        self.store = RoleStore()

        self._state = InitState.IDLE
        self._initialized_successfully = False
        self._listeners = ListenerRegistry()

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def state(self) -> InitState:
        return self._state

    @property
    def desired_source(self) -> DataSource:
        return self.config.desired_source

    @property
    def is_ready(self) -> bool:
        return self._state in (InitState.READY, InitState.FAILED_BUT_READY)

    @property
    def is_initializing(self) -> bool:
        return self._state == InitState.INITIALIZING

    @property
    def initialized_successfully(self) -> bool:
        return self._initialized_successfully

    @property
    def role_names(self):
        """Header role names, unsorted, in header order."""
        return self.store.role_names

    # ------------------------------------------------------------------
    # Listeners
    # ------------------------------------------------------------------

    def notify_when_initialized(self, listener: Any, callback_name: str) -> bool:
        """
        Ask for ``listener.<callback_name>()`` to be called once when ready.

        If already ready the callback runs immediately and nothing is
        registered.

        Returns:
            True if the callback ran or was registered, False if the
            listener was already registered
        """
        if self.is_ready:
            invoke(listener, callback_name)
            return True
        return self._listeners.subscribe(listener, callback_name)

    def remove_listener(self, listener: Any) -> bool:
        return self._listeners.unsubscribe(listener)

    @property
    def pending_listeners(self) -> int:
        return len(self._listeners)

    # ------------------------------------------------------------------
    # Initialization
    # ------------------------------------------------------------------

    def initialize(self) -> bool:
        """
        Start (re)loading the roster. Safe to call again after it finishes.

        Returns:
            False if rejected because initialization is already running
        """
        if self.is_initializing:
            logger.warning("Initialize was called while the account manager is already initializing")
            return False

        self._state = InitState.INITIALIZING
        self._initialized_successfully = False

        if self.config.desired_source == DataSource.OFFLINE:
            logger.info("Using offline data")
            self.current_source = DataSource.OFFLINE
            self._initialized_successfully = True
            self._data_ready()
        else:
            logger.info("Fetching officer data from %s", self.config.remote_url)
            try:
                self.fetcher.load_url(self.config.remote_url, self._on_fetch_success, self._on_fetch_error)
            except Exception as e:
                logger.exception("Fetcher raised while requesting officer data")
                self._on_fetch_error(str(e))
        return True

    def _on_fetch_success(self, text: str) -> None:
        if not self.is_initializing:
            logger.warning("Ignoring fetch result received while not initializing")
            return
        # Overwrite the offline data
        self.raw_data = text
        logger.info("Officer data downloaded successfully")
        self.current_source = DataSource.REMOTE
        self._initialized_successfully = True
        self._data_ready()

    def _on_fetch_error(self, reason: str = "") -> None:
        if not self.is_initializing:
            logger.warning("Ignoring fetch failure received while not initializing")
            return
        logger.warning("Failed to download officer data, using offline data (%s)", reason or "no reason given")
        self.current_source = DataSource.OFFLINE
        self._initialized_successfully = False
        self._data_ready()

    def _data_ready(self) -> None:
        start = time.perf_counter()
        try:
            roster = parse_roster(self.raw_data, self.config.data_format, strict=self.config.strict_parsing)
        except RosterParseError as e:
            # Strict mode only; the previous roster stays in place
            logger.error("Strict parsing rejected officer data, keeping previous roster: %s", e)
            self._initialized_successfully = False
        else:
            self.store.replace(roster)
        if self.config.performance_logging:
            logger.debug("Parsing took %.3fms", (time.perf_counter() - start) * 1000)

        self._state = InitState.READY if self._initialized_successfully else InitState.FAILED_BUT_READY
        logger.info(
            "Roster ready from %s data: %d officers, %d roles",
            self.current_source.value, len(self.store), len(self.store.role_names),
        )

        fired = self._listeners.fire_all()
        if fired:
            logger.debug("Notified %d listener(s)", fired)

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def is_officer(self, name: str) -> bool:
        return self.store.is_known(name)

    def is_local_player_officer(self) -> bool:
        name = self._local_name()
        return name is not None and self.is_officer(name)

    def get_token(self, name: str, role: str):
        """
        Raw value for an officer's role.

        Returns:
            The stored text, or KEY_NOT_FOUND if the officer or the role
            is missing (a warning is logged)
        """
        record = self.store.lookup(name)
        if record is None:
            logger.warning('Officer "%s" not found', name)
            return KEY_NOT_FOUND
        value = record.get(role)
        if value is KEY_NOT_FOUND:
            logger.warning('Role "%s" not found for officer "%s"', role, name)
        return value

    def try_get_token(self, name: str, role: str) -> Tuple[bool, Any]:
        """Like get_token, without logging. Returns (found, value)."""
        record = self.store.lookup(name)
        if record is None:
            return False, KEY_NOT_FOUND
        value = record.get(role)
        return value is not KEY_NOT_FOUND, value

    def get_local_token(self, role: str):
        name = self._local_name()
        if name is None:
            logger.warning("No local player available")
            return KEY_NOT_FOUND
        return self.get_token(name, role)

    def try_get_local_token(self, role: str) -> Tuple[bool, Any]:
        name = self._local_name()
        if name is None:
            return False, KEY_NOT_FOUND
        return self.try_get_token(name, role)

    def _local_name(self) -> Optional[str]:
        if self.local_player is None:
            return None
        return self.local_player()

    # Typed accessors. Defaults: "" / False / 0 / 0.0

    def get_string(self, name: str, role: str) -> str:
        value = self.get_token(name, role)
        if value is KEY_NOT_FOUND:
            return TYPE_DEFAULTS[str]
        return value

    def get_bool(self, name: str, role: str) -> bool:
        return self._get_typed(name, role, bool, parse_bool)

    def get_int(self, name: str, role: str) -> int:
        return self._get_typed(name, role, int, parse_int)

    def get_float(self, name: str, role: str) -> float:
        return self._get_typed(name, role, float, parse_float)

    def _get_typed(self, name: str, role: str, kind: type, parser: Callable):
        value = self.get_token(name, role)
        if value is KEY_NOT_FOUND:
            return TYPE_DEFAULTS[kind]
        result = parser(value)
        if result is None:
            logger.warning(
                'Failed to parse %s for officer "%s" and role "%s"', kind.__name__, name, role,
            )
            return TYPE_DEFAULTS[kind]
        return result

    # ------------------------------------------------------------------
    # Role dictionaries (full scans; do not call every tick)
    # ------------------------------------------------------------------

    def create_role_dict(self, role_name: str) -> Dict[str, str]:
        return create_role_dict(self.store, role_name, timed=self.config.performance_logging)

    def create_filtered_role_dict(
        self, role_name: str, comparator: Union[Comparator, str], value,
    ) -> Dict[str, str]:
        return create_filtered_role_dict(
            self.store, role_name, comparator, value, timed=self.config.performance_logging,
        )


__all__ = ["AccountManager", "InitState"]
