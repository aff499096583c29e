"""
Search Mode Module.

Defines the matching strategies a search box can offer (SearchMode) and the
immutable set of strategies that are currently offered to the user
(EnabledModes).
"""

from enum import Enum
from typing import FrozenSet, Iterable, Iterator


class SearchMode(Enum):
    """
    A single text-matching strategy.

    The value of each member is its bit flag, so modes can still be exchanged
    with callers that store them as an integer mask.
    """

    CONTAINS = 1
    PREFIX = 1 << 1
    SUFFIX = 1 << 2
    REGEX = 1 << 3
    FUZZY = 1 << 4

    @property
    def label(self) -> str:
        """Human readable name, used as the query hint suffix."""
        return _MODE_LABELS[self]

    @property
    def key(self) -> str:
        """Lower-case identifier (e.g. for command line choices)."""
        return self.name.lower()

    @classmethod
    def from_key(cls, key: str) -> "SearchMode":
        """
        Looks up a mode by its lower-case identifier.

        Args:
            key: Identifier such as "contains" or "fuzzy".

        Returns:
            SearchMode: The matching mode.

        Raises:
            ValueError: If no mode has that identifier.
        """
        try:
            return cls[key.strip().upper()]
        except KeyError:
            valid = ", ".join(mode.key for mode in cls)
            raise ValueError(
                f"Unknown search mode: {key!r}. Must be one of: {valid}."
            ) from None


_MODE_LABELS = {
    SearchMode.CONTAINS: "Contains",
    SearchMode.PREFIX: "Prefix",
    SearchMode.SUFFIX: "Suffix",
    SearchMode.REGEX: "Regular expressions",
    SearchMode.FUZZY: "Fuzzy",
}

ALL_FLAGS = sum(mode.value for mode in SearchMode)


class EnabledModes:
    """
    Immutable, never-empty set of search modes offered to the user.

    Iteration always follows the declaration order of SearchMode, regardless
    of the order the modes were given in.
    """

    __slots__ = ("_modes",)

    def __init__(self, modes: Iterable[SearchMode]) -> None:
        """
        Initialize the set.

        Args:
            modes: The modes to enable.

        Raises:
            TypeError: If an item is not a SearchMode.
            ValueError: If no mode is given.
        """
        frozen = frozenset(modes)
        for mode in frozen:
            if not isinstance(mode, SearchMode):
                raise TypeError(f"Expected SearchMode, got {type(mode).__name__}")
        if not frozen:
            raise ValueError("At least one search mode must be enabled.")
        self._modes: FrozenSet[SearchMode] = frozen

    @classmethod
    def all(cls) -> "EnabledModes":
        """Returns a set with every mode enabled."""
        return cls(SearchMode)

    @classmethod
    def from_flags(cls, flags: int) -> "EnabledModes":
        """
        Builds the set from an integer bit mask.

        Args:
            flags: OR-ed SearchMode values.

        Raises:
            ValueError: If the mask is zero or carries unknown bits.
        """
        if flags & ~ALL_FLAGS:
            raise ValueError(f"Unknown search mode bits in mask: {flags:#x}")
        return cls(mode for mode in SearchMode if flags & mode.value)

    def to_flags(self) -> int:
        """Returns the set as an integer bit mask."""
        return sum(mode.value for mode in self._modes)

    def with_modes(self, *modes: SearchMode) -> "EnabledModes":
        """Returns a copy with the given modes added."""
        return EnabledModes(self._modes.union(modes))

    def without_modes(self, *modes: SearchMode) -> "EnabledModes":
        """
        Returns a copy with the given modes removed.

        Raises:
            ValueError: If that would leave no mode enabled.
        """
        return EnabledModes(self._modes.difference(modes))

    def first(self) -> SearchMode:
        """Returns the first enabled mode in declaration order."""
        return next(iter(self))

    def __contains__(self, mode: object) -> bool:
        return mode in self._modes

    def __iter__(self) -> Iterator[SearchMode]:
        return (mode for mode in SearchMode if mode in self._modes)

    def __len__(self) -> int:
        return len(self._modes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EnabledModes):
            return NotImplemented
        return self._modes == other._modes

    def __hash__(self) -> int:
        return hash(self._modes)

    def __repr__(self) -> str:
        names = ", ".join(mode.name for mode in self)
        return f"EnabledModes({names})"
