from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Mapping, MutableMapping

import yaml

from .textstats import SENTENCE_COUNTING_MODES

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class ReadabilityConfig:
    """Configuration options for the readability report."""

    encoding: str = "utf-8"
    sentence_counting: str = "matches"
    default_formula: str | None = None

    def __post_init__(self) -> None:
        if self.sentence_counting not in SENTENCE_COUNTING_MODES:
            raise ValueError(
                f"sentence_counting must be one of {', '.join(SENTENCE_COUNTING_MODES)}; "
                f"got '{self.sentence_counting}'."
            )

    def to_yaml(self) -> str:
        """Render the configuration in the same YAML shape load_config reads."""
        return yaml.safe_dump(asdict(self), sort_keys=False)


def config_from_dict(data: Mapping[str, Any] | None) -> ReadabilityConfig:
    """Build a ReadabilityConfig, skipping (and logging) unrecognised keys."""
    if not data:
        return ReadabilityConfig()
    known = {field.name for field in fields(ReadabilityConfig)}
    unknown = sorted(str(key) for key in data if key not in known)
    if unknown:
        LOGGER.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))
    return ReadabilityConfig(**{key: data[key] for key in data if key in known})


def load_config(path: str | Path | None = None) -> ReadabilityConfig:
    """Read a YAML config file; defaults when no path is given."""
    if path is None:
        return ReadabilityConfig()
    parsed = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
    if parsed is None:
        return ReadabilityConfig()
    if not isinstance(parsed, MutableMapping):
        raise ValueError(f"{path}: configuration YAML must define a mapping.")
    return config_from_dict(parsed)
