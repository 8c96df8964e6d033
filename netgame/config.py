import os
from dataclasses import dataclass

from .errors import ConfigurationError

DEFAULT_SEARCH_DEPTH = 3
SEARCH_DEPTH_ENV = "NETGAME_SEARCH_DEPTH"

@dataclass
class SearchConfig:
    search_depth: int = DEFAULT_SEARCH_DEPTH

    def __post_init__(self):
        if isinstance(self.search_depth, bool) or not isinstance(self.search_depth, int):
            raise ConfigurationError("search_depth must be an integer",
                                     context={"search_depth": self.search_depth})
        if self.search_depth < 1:
            raise ConfigurationError("search_depth must be positive",
                                     context={"search_depth": self.search_depth})

    @classmethod
    def from_env(cls) -> "SearchConfig":
        raw = os.getenv(SEARCH_DEPTH_ENV)
        if raw is None or not raw.strip():
            return cls()
        try:
            depth = int(raw)
        except ValueError:
            raise ConfigurationError(f"{SEARCH_DEPTH_ENV} is not an integer",
                                     context={"value": raw}) from None
        return cls(search_depth=depth)
