"""Configuration classes for pathsearch engines."""

from dataclasses import dataclass


@dataclass
class SearchConfig:
    """Runtime knobs shared by the search engines."""

    # Number of node expansions between DEBUG progress lines (0 disables them).
    # Long or unbounded searches over implicit graphs are otherwise silent.
    progress_interval: int = 100_000

    def should_report(self, expanded: int) -> bool:
        """Return True when a progress line is due after `expanded` expansions."""
        if self.progress_interval <= 0 or expanded <= 0:
            return False
        return expanded % self.progress_interval == 0


# Global configuration instance
SEARCH_CONFIG = SearchConfig()
