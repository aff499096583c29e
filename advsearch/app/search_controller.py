"""
SearchController - Holds the state behind an advanced search box.

Owns the query text, the active SearchMode and the set of modes offered to
the user, and notifies listeners through Qt signals. It has no widgets of its
own; a view connects its text edit and mode menu to the slots below and its
result list to query_changed.
"""

from typing import Any, Callable, Iterable, List, Optional, TypeVar

from PySide6.QtCore import QObject, Signal, Slot

from advsearch.core.logging_config import get_logger
from advsearch.core.search_config import DEFAULT_SETTINGS, SearchSettings
from advsearch.core.search_mode import EnabledModes, SearchMode
from advsearch.services.search_filter import filter_candidates

logger = get_logger(__name__)

T = TypeVar("T")


class SearchController(QObject):
    """
    Search state with change notifications.

    Signals:
        query_changed(str, SearchMode): Text edited, or the mode switched and
            the current text must be re-evaluated.
        query_submitted(str, SearchMode): The user confirmed the query.
        mode_changed(SearchMode): The active mode changed.
        enabled_modes_changed(): The offered modes changed.
    """

    query_changed = Signal(str, object)
    query_submitted = Signal(str, object)
    mode_changed = Signal(object)
    enabled_modes_changed = Signal()

    def __init__(
        self,
        enabled_modes: Optional[EnabledModes] = None,
        mode: SearchMode = SearchMode.CONTAINS,
        settings: Optional[SearchSettings] = None,
        query_hint: str = "",
        parent: Optional[QObject] = None,
    ) -> None:
        """
        Initialize the controller.

        Args:
            enabled_modes: Modes offered to the user. Defaults to all modes.
            mode: Initial active mode. Must be enabled.
            settings: Matching settings used by filter().
            query_hint: Base placeholder text shown in the empty search box.
            parent: Optional parent QObject.

        Raises:
            ValueError: If mode is not among enabled_modes.
        """
        super().__init__(parent)
        self._enabled_modes = enabled_modes or EnabledModes.all()
        if mode not in self._enabled_modes:
            raise ValueError(f"Search mode {mode.name} is not enabled.")
        self._mode = mode
        self._query = ""
        self._query_hint = query_hint
        self.settings = settings or DEFAULT_SETTINGS

    @property
    def query(self) -> str:
        """The current, untrimmed query text."""
        return self._query

    @property
    def mode(self) -> SearchMode:
        """The active search mode."""
        return self._mode

    @property
    def enabled_modes(self) -> EnabledModes:
        """The modes currently offered."""
        return self._enabled_modes

    @Slot(str)
    def set_query(self, text: str) -> None:
        """Updates the query text and emits query_changed."""
        self._query = text
        self.query_changed.emit(text, self._mode)

    @Slot()
    def submit(self) -> None:
        """Emits query_submitted for the current text."""
        self.query_submitted.emit(self._query, self._mode)

    def set_mode(self, mode: SearchMode) -> None:
        """
        Switches the active mode.

        Listeners receive mode_changed followed by query_changed with the
        current text, so results are recomputed under the new mode. Selecting
        the already active mode does nothing.

        Raises:
            ValueError: If the mode is not enabled.
        """
        if mode not in self._enabled_modes:
            raise ValueError(f"Search mode {mode.name} is not enabled.")
        if mode is self._mode:
            return
        logger.debug(f"Search mode changed: {self._mode.name} -> {mode.name}")
        self._mode = mode
        self.mode_changed.emit(mode)
        self.query_changed.emit(self._query, mode)

    def set_enabled_modes(self, modes: EnabledModes) -> None:
        """
        Replaces the offered modes.

        If the active mode is no longer offered, the first enabled mode
        becomes active before enabled_modes_changed is emitted.
        """
        self._enabled_modes = modes
        if self._mode not in modes:
            self.set_mode(modes.first())
        self.enabled_modes_changed.emit()

    def add_enabled_modes(self, *modes: SearchMode) -> None:
        """Offers additional modes."""
        self.set_enabled_modes(self._enabled_modes.with_modes(*modes))

    def remove_enabled_modes(self, *modes: SearchMode) -> None:
        """
        Stops offering the given modes.

        Raises:
            ValueError: If no mode would remain.
        """
        self.set_enabled_modes(self._enabled_modes.without_modes(*modes))

    def set_query_hint(self, hint: str) -> None:
        """Sets the base placeholder text."""
        self._query_hint = hint

    def hint_text(self) -> str:
        """Returns the placeholder text including the active mode label."""
        return f"{self._query_hint} ({self._mode.label})"

    def filter(
        self, candidates: Optional[Iterable[T]], extract: Callable[[T], Any]
    ) -> Optional[List[T]]:
        """
        Filters candidates with the current query, mode and settings.

        Args:
            candidates: Items to filter, or None.
            extract: Returns the text or texts of an item.

        Returns:
            Optional[List]: Matching items, or None if candidates is None.
        """
        return filter_candidates(
            self._query, candidates, extract, self._mode, self.settings
        )
