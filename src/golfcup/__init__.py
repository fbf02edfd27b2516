"""
golfcup: scoring and odds engine for a three-day, two-team golf tournament.

Match results for Best Ball, Stableford and Individual formats, gross and
net skins, the handicap side game, season statistics and handicap-based
betting odds, all as pure functions over typed records.
"""

from importlib.metadata import PackageNotFoundError, version

try:  # pragma: no cover - exercised in packaging workflows
    __version__ = version("golfcup")
except PackageNotFoundError:  # pragma: no cover - local editable installs
    __version__ = "0.0.0"

_EXPORTS = {
    # Records
    "Course": ".models",
    "HoleInfo": ".models",
    "Match": ".models",
    "MatchFormat": ".models",
    "MatchResult": ".models",
    "Player": ".models",
    "Score": ".models",
    "Team": ".models",
    "DataIntegrityError": ".records",
    "load_snapshot": ".records",
    # Scoring
    "strokes_for_hole": ".handicap",
    "net_score": ".handicap",
    "match_play_strokes": ".handicap",
    "stableford_points": ".points",
    "side_game_points": ".points",
    "calculate_best_ball_results": ".matches",
    "calculate_stableford_results": ".matches",
    "calculate_individual_results": ".matches",
    "evaluate_match": ".matches",
    "team_standings": ".matches",
    "calculate_skins": ".skins",
    "summarize_skins": ".skins",
    "score_handicap_game": ".side_game",
    "round_aggregate": ".stats",
    "season_stats": ".stats",
    "mvp_standings": ".stats",
    "dream_round": ".stats",
    # Odds
    "get_odds": ".betting.odds",
    "get_odds_smooth": ".betting.odds",
    "tease_odds": ".betting.odds",
    "format_moneyline": ".betting.utils",
    # Configuration
    "load_config": ".configuration",
    "get_settings": ".config",
}

__all__ = sorted(_EXPORTS)


def __getattr__(name: str) -> object:  # pragma: no cover - thin lazy importer
    from importlib import import_module

    target_module = _EXPORTS.get(name)
    if not target_module:
        raise AttributeError(f"module {__name__} has no attribute {name}")
    module = import_module(target_module, __name__)
    attr = getattr(module, name)
    globals()[name] = attr
    return attr


def __dir__() -> list[str]:  # pragma: no cover - trivial
    return sorted(list(globals().keys()) + __all__)
