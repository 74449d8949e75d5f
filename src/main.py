"""Entry point for the Clash battle simulator.

Reads a two-force roster, reports who wins the unboosted battle and the
smallest boost that lets the helped force (the first one by default) win.

Run with: ``python src/main.py roster.txt [--verbose]``
"""
import argparse
from dataclasses import replace
import logging
import sys

from clash.config import BattleConfig, load_config
from clash.events.bus import EventBus
from clash.factories.roster import RosterParseError, load_armies
from clash.systems.battle import resolve_outcome
from clash.systems.boost_search import BoostSearchSystem
from clash.world import create_world

logger = logging.getLogger("clash")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Simulate a two-force group battle")
    parser.add_argument("roster", help="Roster file with exactly two forces")
    parser.add_argument("--config", help="JSON file with BattleConfig settings")
    parser.add_argument("--helped", help="Name of the force to boost (default: first force)")
    parser.add_argument("--boost-start", type=int, help="First boost tried by the search")
    parser.add_argument("--verbose", action="store_true", help="Log a full battle trace")
    return parser


def build_config(args: argparse.Namespace) -> BattleConfig:
    config = load_config(args.config) if args.config else BattleConfig()
    overrides = {}
    if args.helped is not None:
        overrides["helped_force"] = args.helped
    if args.boost_start is not None:
        overrides["boost_start"] = args.boost_start
    if args.verbose:
        overrides["trace"] = True
    return replace(config, **overrides)


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    try:
        config = build_config(args)
        armies = load_armies(args.roster)
    except (OSError, RosterParseError, ValueError) as exc:
        logger.error("%s", exc)
        return 1

    world = create_world(armies)
    outcome = resolve_outcome(world, config)
    if outcome.is_decisive():
        print(f"Part 1: {outcome.survivors} ({outcome.winner})")
    else:
        print("Part 1: stalemate")

    search = BoostSearchSystem(world, EventBus(), config=config)
    try:
        helped = search.helped_force()
    except KeyError as exc:
        logger.error("%s", exc)
        return 1
    result = search.search(helped)
    print(f"Part 2: {result.survivors} (boost {result.boost})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
