"""Command-line interface for Gavel Pairing.

Pairs rounds, prints standings and results, validates stored rounds and
generates synthetic events, either through subcommands or an interactive
prompt.
"""

# Gavel Pairing
# Copyright (C) 2025  Gavel Pairing developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import argparse
import random
import sys
from typing import Callable, Dict, List, Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import NestedCompleter, WordCompleter
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.styles import Style

from gavelpairing import __version__
from gavelpairing.constants import PAIRING_SYSTEMS
from gavelpairing.controllers.round_planner import RoundPlanner
from gavelpairing.exceptions import GavelPairingException
from gavelpairing.models.pairing import Pairing
from gavelpairing.models.standing import Standing
from gavelpairing.testing.rtg import (
    RandomTournamentGenerator,
    RTGConfig,
    ScorePattern,
    StrengthDistribution,
    summarize_validation_warnings,
)
from gavelpairing.tournament.results import MatchSummary, summarize_event
from gavelpairing.tournament.snapshot import (
    load_snapshot,
    save_event_summary,
    save_pairings,
    save_snapshot,
)
from gavelpairing.tournament.standings_calculator import calculate_standings
from gavelpairing.utils import set_log_level, setup_logger
from gavelpairing.validation.pairing_check import (
    CriterionStatus,
    pairings_from_matches,
    validate_round,
)

logger = setup_logger(__name__)


# ANSI color codes for terminal output
class Colors:
    HEADER = "\033[95m"
    OKBLUE = "\033[94m"
    OKGREEN = "\033[92m"
    WARNING = "\033[93m"
    FAIL = "\033[91m"
    ENDC = "\033[0m"
    BOLD = "\033[1m"


COMMANDS = {
    "pair": {
        "description": "Generate pairings for a round",
        "options": {
            "--file": "Tournament snapshot (JSON)",
            "--round": "Round to pair",
            "--seed": "Random seed for the round-one shuffle",
            "--output": "Write pairings to this file",
        },
    },
    "standings": {
        "description": "Show ranked standings",
        "options": {
            "--file": "Tournament snapshot (JSON)",
        },
    },
    "results": {
        "description": "Show match results and round progress",
        "options": {
            "--file": "Tournament snapshot (JSON)",
            "--round": "Only show this round",
            "--output": "Export the full event summary (JSON)",
        },
    },
    "generate": {
        "description": "Generate a random tournament (RTG)",
        "options": {
            "--teams": "Number of teams (default: 8)",
            "--rounds": "Number of rounds (default: 3)",
            "--system": "Pairing system (swiss/round_robin)",
            "--seed": "Random seed for reproducibility",
            "--judges": "Judges per match (2 or 3)",
            "--distribution": "Strength distribution (uniform/normal/top_heavy)",
            "--pattern": "Score pattern (realistic/balanced/random)",
            "--output": "Write the snapshot to this file",
        },
    },
    "validate": {
        "description": "Check a stored round for pairing problems",
        "options": {
            "--file": "Tournament snapshot (JSON)",
            "--round": "Round to validate",
        },
    },
}


def print_banner():
    """Print the application banner."""
    banner = f"""
{Colors.OKBLUE}╔═══════════════════════════════════════════════════════════════╗
║                                                               ║
║                     GAVEL PAIRING - CLI                       ║
║                                                               ║
╚═══════════════════════════════════════════════════════════════╝{Colors.ENDC}

Type {Colors.BOLD}/help{Colors.ENDC} to see all available commands
Type {Colors.BOLD}exit{Colors.ENDC} or {Colors.BOLD}quit{Colors.ENDC} to leave interactive mode
"""
    print(banner)


def print_commands_list():
    """Print list of all available commands."""
    print(f"\n{Colors.BOLD}Available Commands:{Colors.ENDC}\n")
    for cmd, info in COMMANDS.items():
        print(f"  {Colors.OKGREEN}{cmd:12}{Colors.ENDC} - {info['description']}")
    print()


def print_command_help(command: str):
    """Print detailed help for a specific command."""
    if command not in COMMANDS:
        print(f"{Colors.FAIL}Unknown command: {command}{Colors.ENDC}")
        print_commands_list()
        return

    info = COMMANDS[command]
    print(f"\n{Colors.BOLD}{command}{Colors.ENDC} - {info['description']}\n")
    for option, description in info["options"].items():
        print(f"  {option:16} {description}")
    print()


def create_completer():
    """Create autocomplete completer for interactive mode."""
    completions = {}
    for cmd, info in COMMANDS.items():
        options_completer = (
            WordCompleter(list(info["options"].keys())) if info["options"] else None
        )
        completions[cmd] = options_completer
        completions[f"/{cmd}"] = options_completer

    completions["/help"] = None
    completions["/list"] = None

    return NestedCompleter.from_nested_dict(completions)


# ========== Output Helpers ==========


def _format_pairing(pairing: Pairing) -> str:
    if pairing.is_bye:
        return f"{pairing.team.name} - BYE"
    return f"{pairing.team_a.name} vs {pairing.team_b.name}"


def print_pairings(round_number: int, pairings: List[Pairing]):
    print(f"\n{Colors.BOLD}Round {round_number} pairings{Colors.ENDC}")
    for index, pairing in enumerate(pairings, start=1):
        print(f"  {index:3}. {_format_pairing(pairing)}")
    print()


def print_standings(standings: List[Standing]):
    print(f"\n{Colors.BOLD}Standings{Colors.ENDC}")
    print(f"  {'#':>3}  {'Team':24} {'W':>5} {'Votes':>6} {'Diff':>8} {'M':>3} {'Win%':>6}")
    for line in standings:
        print(
            f"  {line.rank:>3}  {line.team.name:24} {line.wins:>5g} {line.votes:>6g} "
            f"{line.score_differential:>8.1f} {line.total_matches:>3} "
            f"{line.win_percentage:>6.1f}"
        )
    print()


def print_match_summary(summary: MatchSummary):
    winner = summary.winner_id or "tie"
    protocol = " (two-judge)" if summary.two_judge_protocol else ""
    print(
        f"  {summary.match_id}: {summary.team_a_id} {summary.team_a_votes:g} - "
        f"{summary.team_b_votes:g} {summary.team_b_id}  winner: {winner}{protocol}"
    )
    for line in summary.judge_scores:
        totals = ", ".join(f"{team}={total:g}" for team, total in line.team_totals.items())
        print(f"      {line.label}: {totals or 'no ballots'}")


# ========== Commands ==========


def run_pair_command(args: argparse.Namespace) -> int:
    """Run the pair command."""
    snapshot = load_snapshot(args.file)
    prior_matches = [m for m in snapshot.matches if m.round_number < args.round]
    rng = random.Random(args.seed) if args.seed is not None else None

    plan = RoundPlanner(snapshot.config).plan_round(
        snapshot.teams, prior_matches, args.round, rng=rng
    )
    print_pairings(plan.round_number, plan.pairings)

    report = validate_round(
        plan.pairings, snapshot.teams, prior_matches, snapshot.config.pairing_system
    )
    for warning in report.quality_warnings:
        print(f"{Colors.WARNING}Warning: {warning.description}{Colors.ENDC}")

    if args.output:
        save_pairings(args.output, plan.round_number, plan.pairings)
        print(f"{Colors.OKGREEN}Pairings saved to {args.output}{Colors.ENDC}")
    return 0


def run_standings_command(args: argparse.Namespace) -> int:
    """Run the standings command."""
    snapshot = load_snapshot(args.file)
    print_standings(calculate_standings(snapshot.teams, snapshot.matches))
    return 0


def run_results_command(args: argparse.Namespace) -> int:
    """Run the results command."""
    snapshot = load_snapshot(args.file)
    event = summarize_event(snapshot.teams, snapshot.matches)

    for round_summary in event.rounds:
        if args.round is not None and round_summary.round_number != args.round:
            continue
        print(
            f"\n{Colors.BOLD}Round {round_summary.round_number}{Colors.ENDC}: "
            f"{round_summary.completed_matches}/{round_summary.total_matches} completed "
            f"({round_summary.completion_rate:.1f}%)"
        )
        for summary in round_summary.matches:
            print_match_summary(summary)
    print()

    if args.output:
        save_event_summary(args.output, event)
        print(f"{Colors.OKGREEN}Event summary saved to {args.output}{Colors.ENDC}")
    return 0


def run_generate_command(args: argparse.Namespace) -> int:
    """Run the generate (RTG) command."""
    print(f"\n{Colors.BOLD}Generating tournament...{Colors.ENDC}")

    config = RTGConfig(
        num_teams=args.teams,
        num_rounds=args.rounds,
        pairing_system=args.system,
        judges_per_match=args.judges,
        strength_distribution=StrengthDistribution(args.distribution),
        score_pattern=ScorePattern(args.pattern),
        seed=args.seed,
    )
    generator = RandomTournamentGenerator(config)
    data = generator.generate_complete_tournament()

    print(
        f"{Colors.OKGREEN}Generated {len(data['teams'])} teams, "
        f"{len(data['matches'])} matches over {len(data['rounds'])} rounds{Colors.ENDC}"
    )
    warnings = summarize_validation_warnings(data)
    if warnings:
        print(f"{Colors.WARNING}Quality warnings: {warnings}{Colors.ENDC}")

    if args.output:
        save_snapshot(args.output, generator.export_snapshot(data))
        print(f"{Colors.OKGREEN}Snapshot saved to {args.output}{Colors.ENDC}")
    else:
        print_standings(calculate_standings(data["teams"], data["matches"]))
    return 0


def run_validate_command(args: argparse.Namespace) -> int:
    """Run the validate command."""
    snapshot = load_snapshot(args.file)
    round_matches = snapshot.matches_in_round(args.round)
    if not round_matches:
        print(f"{Colors.FAIL}No matches stored for round {args.round}{Colors.ENDC}")
        return 1

    prior_matches = [m for m in snapshot.matches if m.round_number < args.round]
    pairings = pairings_from_matches(round_matches, snapshot.teams)
    report = validate_round(
        pairings, snapshot.teams, prior_matches, snapshot.config.pairing_system
    )

    print(f"\n{Colors.BOLD}Round {args.round}: {report.summary}{Colors.ENDC}")
    for result in report.criteria_results:
        if result.status == CriterionStatus.VIOLATION:
            color = Colors.FAIL if result in report.violations else Colors.WARNING
        else:
            color = Colors.OKGREEN
        print(f"  {color}{result.criterion} {result.status.value}{Colors.ENDC} {result.description}")
    print(f"  Compliance: {report.compliance_percentage:.1f}%\n")
    return 0 if report.is_valid else 1


# ========== Parsers ==========


def add_pair_arguments(parser: argparse.ArgumentParser):
    parser.add_argument("--file", required=True)
    parser.add_argument("--round", type=int, required=True)
    parser.add_argument("--seed", type=int)
    parser.add_argument("--output")
    parser.set_defaults(func=run_pair_command)


def add_standings_arguments(parser: argparse.ArgumentParser):
    parser.add_argument("--file", required=True)
    parser.set_defaults(func=run_standings_command)


def add_results_arguments(parser: argparse.ArgumentParser):
    parser.add_argument("--file", required=True)
    parser.add_argument("--round", type=int)
    parser.add_argument("--output")
    parser.set_defaults(func=run_results_command)


def add_generate_arguments(parser: argparse.ArgumentParser):
    parser.add_argument("--teams", type=int, default=8)
    parser.add_argument("--rounds", type=int, default=3)
    parser.add_argument("--system", choices=list(PAIRING_SYSTEMS), default="swiss")
    parser.add_argument("--seed", type=int)
    parser.add_argument("--judges", type=int, choices=[2, 3], default=3)
    parser.add_argument(
        "--distribution",
        choices=[d.value for d in StrengthDistribution],
        default=StrengthDistribution.NORMAL.value,
    )
    parser.add_argument(
        "--pattern",
        choices=[p.value for p in ScorePattern],
        default=ScorePattern.REALISTIC.value,
    )
    parser.add_argument("--output")
    parser.set_defaults(func=run_generate_command)


def add_validate_arguments(parser: argparse.ArgumentParser):
    parser.add_argument("--file", required=True)
    parser.add_argument("--round", type=int, required=True)
    parser.set_defaults(func=run_validate_command)


COMMAND_ARGUMENTS: Dict[str, Callable[[argparse.ArgumentParser], None]] = {
    "pair": add_pair_arguments,
    "standings": add_standings_arguments,
    "results": add_results_arguments,
    "generate": add_generate_arguments,
    "validate": add_validate_arguments,
}


def create_command_parser(command: str) -> argparse.ArgumentParser:
    """Create a stand-alone parser for one command (interactive mode)."""
    parser = argparse.ArgumentParser(
        prog=command, description=COMMANDS[command]["description"]
    )
    COMMAND_ARGUMENTS[command](parser)
    return parser


def create_main_parser():
    """Create main argument parser."""
    parser = argparse.ArgumentParser(
        prog="gavel",
        description="Pairing and results engine for judged team tournaments",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Interactive mode
  gavel

  # Pair round 2 of a stored event
  gavel pair --file event.json --round 2 --output round2.json

  # Standings
  gavel standings --file event.json

  # Generate a seeded synthetic event
  gavel generate --teams 8 --rounds 3 --seed 42 --output event.json
        """,
    )
    parser.add_argument(
        "--interactive", "-i", action="store_true", help="Start in interactive mode"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")
    for command, add_arguments in COMMAND_ARGUMENTS.items():
        add_arguments(
            subparsers.add_parser(command, help=COMMANDS[command]["description"])
        )

    return parser


def execute(args: argparse.Namespace) -> int:
    """Run a parsed command, reporting domain errors instead of raising."""
    try:
        return args.func(args)
    except GavelPairingException as e:
        print(f"{Colors.FAIL}Error: {e}{Colors.ENDC}")
        logger.debug("Command failed", exc_info=True)
        return 1


def run_interactive_mode() -> int:
    """Run in interactive mode with autocomplete."""
    print_banner()

    style = Style.from_dict(
        {
            "prompt": "#00aa00 bold",
        }
    )

    session = PromptSession(
        completer=create_completer(),
        history=InMemoryHistory(),
        style=style,
    )

    while True:
        try:
            user_input = session.prompt("gavel> ").strip()

            if not user_input:
                continue

            if user_input in ["exit", "quit", "q"]:
                print(f"\n{Colors.OKGREEN}Goodbye!{Colors.ENDC}\n")
                break

            if user_input in ["/help", "help", "?", "/list"]:
                print_commands_list()
                continue

            if user_input.startswith("/help ") or user_input.startswith("help "):
                print_command_help(user_input.split()[1].lstrip("/"))
                continue

            parts = user_input.split()
            command = parts[0].lstrip("/")
            if command not in COMMANDS:
                print(f"{Colors.FAIL}Unknown command: {command}{Colors.ENDC}")
                print(f"Type {Colors.BOLD}/help{Colors.ENDC} to see available commands")
                continue

            try:
                args = create_command_parser(command).parse_args(parts[1:])
                execute(args)
            except SystemExit:
                # argparse calls sys.exit on error, catch it
                continue

        except KeyboardInterrupt:
            print(f"\n{Colors.WARNING}Use 'exit' or 'quit' to leave{Colors.ENDC}")
        except EOFError:
            print(f"\n{Colors.OKGREEN}Goodbye!{Colors.ENDC}\n")
            break

    return 0


def run_standard_mode(argv: Optional[List[str]] = None) -> int:
    """Run in standard CLI mode (non-interactive)."""
    parser = create_main_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        set_log_level("DEBUG")

    if args.interactive:
        return run_interactive_mode()

    if hasattr(args, "func"):
        return execute(args)
    parser.print_help()
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the gavel CLI."""
    if argv is None:
        argv = sys.argv[1:]

    # If no arguments, start interactive mode
    if not argv:
        return run_interactive_mode()

    return run_standard_mode(argv)


if __name__ == "__main__":
    sys.exit(main())
