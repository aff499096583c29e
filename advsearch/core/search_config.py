"""
Search Configuration Module.
Defines the tunable settings shared by the matcher and the filters.
"""

from dataclasses import dataclass

DEFAULT_FUZZY_MIN_SCORE = 50.0


@dataclass(frozen=True)
class SearchSettings:
    """
    Configuration settings for text matching.

    Attributes:
        fuzzy_min_score: Minimum weighted ratio (0-100) a text must reach to
            count as a fuzzy match.
        case_sensitive: If False, all modes compare case-folded text and
            regular expressions are compiled with re.IGNORECASE.
    """

    fuzzy_min_score: float = DEFAULT_FUZZY_MIN_SCORE
    case_sensitive: bool = True

    def __post_init__(self) -> None:
        if not 0.0 <= self.fuzzy_min_score <= 100.0:
            raise ValueError(
                f"Invalid fuzzy_min_score: {self.fuzzy_min_score}. "
                "Must be between 0 and 100."
            )

    def to_dict(self) -> dict:
        """
        Converts the settings to a dictionary for JSON serialization.

        Returns:
            dict: Dictionary representation of the settings.
        """
        return {
            "fuzzy_min_score": self.fuzzy_min_score,
            "case_sensitive": self.case_sensitive,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "SearchSettings":
        """
        Creates SearchSettings from a dictionary.

        Args:
            data: Dictionary containing setting values. Missing keys fall back
                to the defaults.

        Returns:
            SearchSettings: A new SearchSettings instance.
        """
        return cls(
            fuzzy_min_score=float(
                data.get("fuzzy_min_score", DEFAULT_FUZZY_MIN_SCORE)
            ),
            case_sensitive=data.get("case_sensitive", True),
        )


DEFAULT_SETTINGS = SearchSettings()
