"""Command line interface for tournament scoring and odds."""

from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import sys
from typing import Callable, Dict, List, Sequence, TypeVar

from .betting.bets import price_bet
from .betting.odds import get_odds, get_odds_smooth, live_win_prob
from .betting.utils import format_moneyline
from .config import get_settings
from .configuration import TournamentConfig, load_config, validate_config
from .logging import configure_logging
from .matches import evaluate_match, team_standings
from .models import Course, Match, MatchResult
from .records import DataIntegrityError, Snapshot, load_snapshot
from .side_game import score_handicap_game
from .skins import calculate_skins, summarize_skins
from .stats import dream_round, mvp_standings

logger = logging.getLogger(__name__)


@dataclasses.dataclass(slots=True)
class CommandContext:
    """Loaded tournament data shared across command handlers."""

    snapshot: Snapshot
    config: TournamentConfig

    def course_for_day(self, day: int) -> Course:
        course = self.snapshot.course_for_day(day)
        if course is None:
            raise DataIntegrityError(f"no course configured for day {day}")
        return self.config.course.apply(course)

    def course_for(self, match: Match) -> Course:
        course = self.snapshot.course_for(match)
        if course is None:
            raise DataIntegrityError(f"no course for match {match.id}")
        return self.config.course.apply(course)

    def courses(self) -> List[Course]:
        return [self.config.course.apply(course) for course in self.snapshot.courses]

    def courses_by_day(self) -> Dict[int, Course]:
        return {course.day: self.config.course.apply(course) for course in self.snapshot.courses}


HandlerT = TypeVar("HandlerT", bound=Callable[..., None])


@dataclasses.dataclass(slots=True)
class Subcommand:
    """Container describing a CLI sub-command."""

    name: str
    help: str
    configure: Callable[[argparse.ArgumentParser], None]
    handler: Callable[..., None]
    requires_snapshot: bool

    def add_to_parser(self, subparsers, parent: argparse.ArgumentParser) -> argparse.ArgumentParser:
        parser = subparsers.add_parser(self.name, parents=[parent], help=self.help)
        if self.requires_snapshot:
            parser.add_argument("--snapshot", required=True, help="JSON export of the tournament tables")
        self.configure(parser)
        parser.set_defaults(
            handler=self.handler,
            command=self.name,
            requires_snapshot=self.requires_snapshot,
        )
        return parser


class SubcommandApp:
    """Registry that wires handlers into an :class:`argparse` parser."""

    def __init__(self, description: str | None = None) -> None:
        self._commands: list[Subcommand] = []
        self._description = description

    def command(
        self,
        name: str,
        *,
        help: str,
        configure: Callable[[argparse.ArgumentParser], None] = lambda parser: None,
        requires_snapshot: bool = True,
    ) -> Callable[[HandlerT], HandlerT]:
        """Register ``handler`` as a sub-command with configuration callback."""

        def _decorator(handler: HandlerT) -> HandlerT:
            self._commands.append(
                Subcommand(
                    name=name,
                    help=help,
                    configure=configure,
                    handler=handler,
                    requires_snapshot=requires_snapshot,
                )
            )
            return handler

        return _decorator

    @property
    def commands(self) -> Sequence[Subcommand]:
        return tuple(self._commands)

    def build_parser(self) -> argparse.ArgumentParser:
        parent = argparse.ArgumentParser(add_help=False)
        parent.add_argument("--config", dest="config_file")
        parent.add_argument("--environment", dest="config_environment")
        parent.add_argument("--log-level")

        parser = argparse.ArgumentParser(prog="golfcup", description=self._description)
        subparsers = parser.add_subparsers(dest="command", required=True)
        for command in self._commands:
            command.add_to_parser(subparsers, parent)
        return parser


APP = SubcommandApp(description=__doc__)


def _emit(payload: object) -> None:
    print(json.dumps(payload, indent=2))


def _result_payload(result: MatchResult) -> Dict[str, object]:
    payload = dataclasses.asdict(result)
    payload["holes"] = list(result.holes)
    payload["pairs"] = [dataclasses.asdict(pair) for pair in result.pairs]
    return payload


def _configure_odds_parser(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("hcp_a", type=float)
    parser.add_argument("hcp_b", type=float)
    parser.add_argument("--bet-type", choices=("overall", "front", "back"), default="overall")
    parser.add_argument("--tease", type=int, default=0)
    parser.add_argument("--smooth", action="store_true", default=False)
    parser.add_argument("--lead", type=float, help="Side A's live net lead in strokes")
    parser.add_argument("--holes-played", type=int, default=0)


@APP.command(
    "odds",
    help="Price a handicap matchup",
    configure=_configure_odds_parser,
    requires_snapshot=False,
)
def handle_odds(config: TournamentConfig, args: argparse.Namespace) -> None:
    if args.tease or args.bet_type != "overall":
        line = price_bet(
            args.hcp_a,
            args.hcp_b,
            args.bet_type,
            args.tease,
            limit=config.odds.tease_limit,
            regression=config.odds.nine_hole_regression,
        )
        a_win_pct, a_ml, b_ml = line.a_win_pct, line.a_moneyline, line.b_moneyline
    else:
        odds = (get_odds_smooth if args.smooth else get_odds)(args.hcp_a, args.hcp_b)
        a_win_pct, a_ml, b_ml = odds.a_win_pct, odds.a_moneyline, odds.b_moneyline
    payload: Dict[str, object] = {
        "bet_type": args.bet_type,
        "tease": args.tease,
        "a_win_pct": round(a_win_pct, 2),
        "b_win_pct": round(100.0 - a_win_pct, 2),
        "a_moneyline": format_moneyline(a_ml),
        "b_moneyline": format_moneyline(b_ml),
    }
    if args.lead is not None:
        payload["live_a_win_pct"] = round(
            live_win_prob(
                a_win_pct,
                args.lead,
                args.holes_played,
                sigma_per_hole=config.odds.live_sigma_per_hole,
            ),
            2,
        )
    _emit(payload)


def _configure_match_parser(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("match_id")


@APP.command("match", help="Score a single match", configure=_configure_match_parser)
def handle_match(context: CommandContext, args: argparse.Namespace) -> None:
    match = context.snapshot.match(args.match_id)
    if match is None:
        raise DataIntegrityError(f"unknown match {args.match_id!r}")
    course = context.course_for(match)
    result = evaluate_match(match, context.snapshot.scores, context.snapshot.players, course)
    _emit(_result_payload(result))


def _configure_day_parser(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("day", type=int, choices=(1, 2, 3))


@APP.command("skins", help="Gross and net skins for a day", configure=_configure_day_parser)
def handle_skins(context: CommandContext, args: argparse.Namespace) -> None:
    snapshot = context.snapshot
    course = context.course_for_day(args.day)
    results = calculate_skins(snapshot.players, snapshot.scores_for_day(args.day), course)
    summary = summarize_skins(results, pot=context.config.skins.pot, carryover=context.config.skins.carryover)
    holes: List[Dict[str, object]] = []
    for result in results:
        holes.append(
            {
                "hole": result.hole,
                "par": result.par,
                "gross_winner": result.gross_winner.display_name if result.gross_winner else None,
                "gross_score": result.gross_score,
                "gross_tie": result.gross_tie,
                "net_winner": result.net_winner.display_name if result.net_winner else None,
                "net_score": result.net_score,
                "net_tie": result.net_tie,
            }
        )
    _emit(
        {
            "day": args.day,
            "holes": holes,
            "total_skins_won": summary.total_skins_won,
            "payout_per_skin": round(summary.payout_per_skin, 2),
            "carryover": {"gross": summary.gross_carryover, "net": summary.net_carryover},
            "payouts": {player_id: round(amount, 2) for player_id, amount in summary.payouts().items()},
        }
    )


@APP.command("handicap-game", help="Handicap side game leaderboard", configure=_configure_day_parser)
def handle_handicap_game(context: CommandContext, args: argparse.Namespace) -> None:
    snapshot = context.snapshot
    result = score_handicap_game(
        snapshot.players,
        snapshot.scores_for_day(args.day),
        context.course_for_day(args.day),
        snapshot.matches_for_day(args.day),
        base_points=context.config.side_game.base_points,
    )
    _emit(
        {
            "day": args.day,
            "day_complete": result.day_complete,
            "scores_entered": result.scores_entered,
            "players": [
                {
                    "rank": player.rank,
                    "player": player.display_name,
                    "target": player.target_points,
                    "points": player.total_points,
                    "surplus": player.surplus,
                    "eligible": player.eligible,
                    "holes_played": player.holes_played,
                }
                for player in result.players
            ],
        }
    )


@APP.command("standings", help="Team standings and MVP table")
def handle_standings(context: CommandContext, args: argparse.Namespace) -> None:
    snapshot = context.snapshot
    courses = context.courses_by_day()
    results = {}
    for match in snapshot.matches:
        course = courses.get(match.day)
        if course is None:
            logger.warning("No course for day %s; match %s not scored", match.day, match.id)
            continue
        results[match.id] = evaluate_match(match, snapshot.scores, snapshot.players, course)
    standings = team_standings(snapshot.matches, results, snapshot.players)
    mvp = mvp_standings(snapshot.matches, snapshot.players, snapshot.scores, courses)
    _emit(
        {
            "teams": {team.value: points for team, points in standings.items()},
            "mvp": [
                {
                    "player": entry.display_name,
                    "team": entry.team,
                    "match_points": entry.match_points,
                    "net_aggregate": entry.net_aggregate,
                    "birdies": entry.birdies,
                }
                for entry in mvp
            ],
        }
    )


@APP.command("dream-round", help="Best gross and net on every hole across the tournament")
def handle_dream_round(context: CommandContext, args: argparse.Namespace) -> None:
    snapshot = context.snapshot
    result = dream_round(snapshot.players, snapshot.matches, snapshot.scores, context.courses())
    if result is None:
        _emit(None)
        return
    names = {player.id: player.display_name for player in snapshot.players}
    _emit(
        {
            "gross": result.gross,
            "net": result.net,
            "top_gross_contributor": names[result.top_gross_contributor],
            "top_net_contributor": names[result.top_net_contributor],
            "holes": [
                {
                    "hole": hole.hole,
                    "gross": hole.gross,
                    "gross_player": names[hole.gross_player_id],
                    "net": hole.net,
                    "net_player": names[hole.net_player_id],
                }
                for hole in result.holes
            ],
            "players": [
                {"player": entry.display_name, "gross": entry.gross, "net": entry.net}
                for entry in result.players
            ],
        }
    )


@APP.command("validate-config", help="Validate tournament configuration", requires_snapshot=False)
def handle_validate_config(config: TournamentConfig, args: argparse.Namespace) -> None:
    warnings = validate_config(config)
    for message in warnings:
        print(f"[config-warning] {message}")
    print(f"Configuration '{config.environment}' is valid.")


def _build_parser() -> argparse.ArgumentParser:
    return APP.build_parser()


def _dispatch(args: argparse.Namespace) -> None:
    settings = get_settings()
    config = load_config(
        base_path=args.config_file or settings.config_path,
        environment=args.config_environment or settings.environment,
    )
    logger.info("Using configuration environment %r", config.environment)
    handler = args.handler
    if not args.requires_snapshot:
        handler(config, args)
        return

    for message in validate_config(config):
        logger.warning("[config-warning] %s", message)
    context = CommandContext(snapshot=load_snapshot(args.snapshot), config=config)
    logger.info(
        "Loaded snapshot with %d matches and %d scores",
        len(context.snapshot.matches),
        len(context.snapshot.scores),
    )
    handler(context, args)


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level or get_settings().log_level)
    try:
        _dispatch(args)
    except (ValueError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


__all__ = ["APP", "main"]


if __name__ == "__main__":  # pragma: no cover - CLI entrypoint
    raise SystemExit(main())
