from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from typing import Any, Dict, Mapping, Sequence

import yaml
from pydantic import BaseModel, Field

from .betting.bets import TEASE_LIMIT
from .betting.odds import LIVE_SIGMA_PER_HOLE, NINE_HOLE_REGRESSION
from .models import PLACEHOLDER_HOLE, Course, HoleInfo
from .side_game import BASE_POINTS
from .skins import DEFAULT_POT

ENVIRONMENT_VARIABLE = "GOLFCUP_ENV"
EXTRA_CONFIG_VARIABLE = "GOLFCUP_EXTRA_CONFIG"
ENV_OVERRIDE_PREFIX = "GOLFCUP__"
DEFAULT_CONFIG_PATH = Path("config/tournament.yaml")

logger = logging.getLogger(__name__)


class OddsConfig(BaseModel):
    """Pricing knobs for matchup odds and side bets."""

    nine_hole_regression: float = NINE_HOLE_REGRESSION
    tease_limit: int = TEASE_LIMIT
    live_sigma_per_hole: float = LIVE_SIGMA_PER_HOLE


class SkinsConfig(BaseModel):
    """Skins pot size and whether tied holes carry over."""

    pot: float = DEFAULT_POT
    carryover: bool = True


class SideGameConfig(BaseModel):
    base_points: int = BASE_POINTS


class CourseConfig(BaseModel):
    """Values used for holes missing from a course's par data."""

    placeholder_par: int = PLACEHOLDER_HOLE.par
    placeholder_stroke_index: int = PLACEHOLDER_HOLE.stroke_index

    def placeholder(self) -> HoleInfo:
        return HoleInfo(par=self.placeholder_par, stroke_index=self.placeholder_stroke_index)

    def apply(self, course: Course) -> Course:
        """Return ``course`` with this placeholder for undefined holes."""

        return Course(
            id=course.id,
            name=course.name,
            day=course.day,
            holes=course.holes,
            tees=course.tees,
            placeholder=self.placeholder(),
        )


class TournamentConfig(BaseModel):
    """Aggregate configuration for the tournament tools."""

    environment: str = "default"
    odds: OddsConfig = Field(default_factory=OddsConfig)
    skins: SkinsConfig = Field(default_factory=SkinsConfig)
    side_game: SideGameConfig = Field(default_factory=SideGameConfig)
    course: CourseConfig = Field(default_factory=CourseConfig)


class ConfigurationError(ValueError):
    """Raised when tournament configuration validation fails."""


_TOKEN = re.compile(r"\$\{([^}]+)\}")


def _read_layer(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        layer = yaml.safe_load(handle)
    if layer is None:
        return {}
    if not isinstance(layer, Mapping):
        raise ConfigurationError(f"{path} must contain a mapping at the top level")
    return dict(layer)


def _deep_merge(base: Mapping[str, Any], layer: Mapping[str, Any]) -> Dict[str, Any]:
    """Merge ``layer`` over ``base``; nested mappings merge, anything else replaces."""

    merged = dict(base)
    for key, value in layer.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            value = _deep_merge(current, value)
        merged[key] = value
    return merged


def _substitute_tokens(node: Any) -> Any:
    if isinstance(node, str):
        return _TOKEN.sub(lambda found: os.environ.get(found.group(1), ""), node)
    if isinstance(node, Mapping):
        return {key: _substitute_tokens(value) for key, value in node.items()}
    if isinstance(node, list):
        return [_substitute_tokens(item) for item in node]
    return node


def _env_layer(environ: Mapping[str, str]) -> Dict[str, Any]:
    """Nested overrides from ``GOLFCUP__section__key=value`` variables.

    Values are parsed as YAML scalars so ``false``, ``250`` and ``1.5`` arrive
    typed.
    """

    layer: Dict[str, Any] = {}
    for name, raw in environ.items():
        if not name.startswith(ENV_OVERRIDE_PREFIX):
            continue
        suffix = name[len(ENV_OVERRIDE_PREFIX) :]
        path = [part.lower().replace("-", "_") for part in suffix.split("__") if part]
        if not path:
            continue
        node = layer
        for part in path[:-1]:
            child = node.get(part)
            if not isinstance(child, dict):
                child = node[part] = {}
            node = child
        try:
            node[path[-1]] = yaml.safe_load(raw)
        except yaml.YAMLError:
            node[path[-1]] = raw
    return layer


def load_config(
    *,
    base_path: str | os.PathLike[str] | None = None,
    environment: str | None = None,
    extra_paths: Sequence[str | os.PathLike[str]] | None = None,
) -> TournamentConfig:
    """Load layered tournament configuration.

    ``config/tournament.yaml`` is merged with ``tournament.<env>.yaml`` when
    present, then with any extra override files (``extra_paths`` followed by
    the ``GOLFCUP_EXTRA_CONFIG`` path list), then with ``GOLFCUP__section__key``
    environment variables. ``${VAR}`` tokens are substituted last. A missing
    base file yields the built-in defaults.
    """

    config_path = Path(base_path or DEFAULT_CONFIG_PATH)
    if config_path.exists():
        data = _read_layer(config_path)
    else:
        logger.debug("No configuration at %s; using defaults", config_path)
        data = {}

    env_name = environment or os.getenv(ENVIRONMENT_VARIABLE) or data.get("environment")
    if isinstance(env_name, str) and env_name:
        env_path = config_path.with_name(f"{config_path.stem}.{env_name}{config_path.suffix}")
        if env_path.exists():
            data = _deep_merge(data, _read_layer(env_path))
        data["environment"] = env_name

    override_sources = [Path(path) for path in extra_paths or ()]
    env_overrides = os.getenv(EXTRA_CONFIG_VARIABLE)
    if env_overrides:
        override_sources.extend(Path(token) for token in env_overrides.split(os.pathsep) if token)
    for override in override_sources:
        if override.exists():
            data = _deep_merge(data, _read_layer(override))
        else:
            logger.warning("Configuration override %s does not exist", override)

    data = _substitute_tokens(_deep_merge(data, _env_layer(os.environ)))
    return TournamentConfig.model_validate(data)


def validate_config(config: TournamentConfig) -> list[str]:
    """Validate a :class:`TournamentConfig`.

    Returns warning messages; raises :class:`ConfigurationError` listing every
    fatal problem.
    """

    errors: list[str] = []
    warnings: list[str] = []

    odds = config.odds
    if not 0 < odds.nine_hole_regression <= 1:
        errors.append("odds.nine_hole_regression must be within (0, 1]")
    if odds.tease_limit < 0:
        errors.append("odds.tease_limit must be non-negative")
    elif odds.tease_limit > 10:
        warnings.append("odds.tease_limit above 10 strokes prices lines far outside the simulated range")
    if odds.live_sigma_per_hole <= 0:
        errors.append("odds.live_sigma_per_hole must be greater than zero")

    if config.skins.pot < 0:
        errors.append("skins.pot must be non-negative")
    elif config.skins.pot == 0:
        warnings.append("skins.pot is zero; every skin pays nothing")

    if config.side_game.base_points <= 0:
        errors.append("side_game.base_points must be greater than zero")

    course = config.course
    if not 3 <= course.placeholder_par <= 6:
        errors.append("course.placeholder_par must be between 3 and 6")
    if not 1 <= course.placeholder_stroke_index <= 18:
        errors.append("course.placeholder_stroke_index must be between 1 and 18")

    if errors:
        bullet_list = "\n".join(f"- {message}" for message in errors)
        raise ConfigurationError(f"Configuration validation failed:\n{bullet_list}")
    return warnings


__all__ = [
    "ConfigurationError",
    "CourseConfig",
    "OddsConfig",
    "SideGameConfig",
    "SkinsConfig",
    "TournamentConfig",
    "load_config",
    "validate_config",
]
