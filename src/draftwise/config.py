from __future__ import annotations

import random
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Callable, Mapping, MutableMapping

import yaml

from .lexicon import Lexicon, load_lexicon


@dataclass(slots=True)
class RewriteSettings:
    """Defaults applied to the rewrite tool."""

    tone: str = "professional"
    seed: int | None = None

    def random_source(self) -> Callable[[], float]:
        """Seeded generator when a seed is configured, else the global one."""
        if self.seed is None:
            return random.random
        return random.Random(self.seed).random


@dataclass(slots=True)
class DraftwiseConfig:
    """Configuration options for analysis and transformation runs."""

    include_stats: bool = True
    json_indent: int = 2
    lexicon_path: str | None = None
    rewrite: RewriteSettings = field(default_factory=RewriteSettings)

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))

    def load_lexicon(self) -> Lexicon:
        """Lexicon named by ``lexicon_path``, or the built-in tables."""
        return load_lexicon(self.lexicon_path)


def _build_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    allowed = {field.name for field in fields(DraftwiseConfig)}
    kwargs = {key: data[key] for key in data if key in allowed}
    if "rewrite" in data:
        rewrite_value = data["rewrite"]
        if isinstance(rewrite_value, RewriteSettings):
            kwargs["rewrite"] = rewrite_value
        elif isinstance(rewrite_value, Mapping):
            kwargs["rewrite"] = _build_rewrite_settings(rewrite_value)
        else:
            kwargs.pop("rewrite")
    return kwargs


def _build_rewrite_settings(data: Mapping[str, Any]) -> RewriteSettings:
    rewrite_allowed = {field.name for field in fields(RewriteSettings)}
    filtered = {key: data[key] for key in data if key in rewrite_allowed}
    return RewriteSettings(**filtered)


def config_from_dict(data: Mapping[str, Any] | None) -> DraftwiseConfig:
    """Build a DraftwiseConfig from a dictionary-like input."""
    if data is None:
        return DraftwiseConfig()
    return DraftwiseConfig(**_build_kwargs(data))


def config_from_yaml(path: str | Path) -> DraftwiseConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> DraftwiseConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return DraftwiseConfig()
    return config_from_yaml(path)
