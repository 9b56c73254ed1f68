"""Configuration for word-ladder searches."""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from wordladder.model.cost import CostScalar
from wordladder.types.base import Algorithm


@dataclass
class SearchConfig:
    """Settings of a search run."""

    # Algorithm used when the caller does not pick one
    algorithm: Algorithm = Algorithm.ASTAR

    # numpy unsigned dtype holding each cost bucket
    dtype: str = "uint8"

    # Stop after this many node expansions and report no path (None: unbounded)
    max_expansions: Optional[int] = None

    def __post_init__(self) -> None:
        if isinstance(self.algorithm, str):
            self.algorithm = Algorithm.from_string(self.algorithm)
        elif not isinstance(self.algorithm, Algorithm):
            raise ValueError(f"Invalid algorithm {self.algorithm!r}")
        # Raises ValueError on a bad dtype.
        self.scalar()
        if self.max_expansions is not None:
            if isinstance(self.max_expansions, bool) or not isinstance(
                self.max_expansions, int
            ):
                raise ValueError(
                    f"max_expansions must be an integer, got {self.max_expansions!r}"
                )
            if self.max_expansions < 0:
                raise ValueError("max_expansions must be non-negative")

    def scalar(self) -> CostScalar:
        """Return the bucket scalar described by ``dtype``."""
        return CostScalar.from_dtype(self.dtype)

    @classmethod
    def from_dict(cls, data: Dict[Any, Any]) -> "SearchConfig":
        """Build a config from a mapping, rejecting unknown keys.

        Raises:
            ValueError: On unknown keys or invalid values.
        """
        # YAML 1.1 may hand back non-string keys (e.g. booleans).
        normalized = {str(key): value for key, value in data.items()}
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(normalized) - known)
        if unknown:
            raise ValueError(
                f"Unknown config keys: {', '.join(unknown)}. "
                f"Valid keys are: {', '.join(sorted(known))}"
            )
        return cls(**normalized)


def load_config(path: Union[str, Path]) -> SearchConfig:
    """Load a ``SearchConfig`` from a YAML file.

    An empty file yields the defaults.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        ValueError: If the document is not a mapping or holds invalid values.
    """
    text = Path(path).read_text(encoding="utf-8")
    data = yaml.safe_load(text)
    if data is None:
        return SearchConfig()
    if not isinstance(data, dict):
        raise ValueError(
            f"Config file {path} must contain a mapping, got {type(data).__name__}"
        )
    return SearchConfig.from_dict(data)


# Global configuration instance
DEFAULT_CONFIG = SearchConfig()
