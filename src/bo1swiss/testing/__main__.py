"""Bo1 Swiss testing CLI: simulate, audit and inspect tournaments."""

# Bo1 Swiss
# Copyright (C) 2025  Bo1 Swiss developers
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
import shlex
import sys
from typing import List, Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import NestedCompleter, WordCompleter
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.styles import Style

from bo1swiss.exceptions import Bo1SwissException
from bo1swiss.testing.rtg import RandomTournamentGenerator, ResultPattern, RTGConfig
from bo1swiss.tournament import Tournament
from bo1swiss.utils import set_log_level, setup_logger
from bo1swiss.utils.storage import load_tournament, save_tournament
from bo1swiss.validation import ValidationReport, validate_tournament

logger = setup_logger(__name__)


# ANSI color codes for terminal output
class Colors:
    HEADER = "\033[95m"
    OKBLUE = "\033[94m"
    OKCYAN = "\033[96m"
    OKGREEN = "\033[92m"
    WARNING = "\033[93m"
    FAIL = "\033[91m"
    ENDC = "\033[0m"
    BOLD = "\033[1m"


# Command definitions with their options
COMMANDS = {
    "simulate": {
        "description": "Play a random tournament to completion (RTG)",
        "options": {
            "--players": "Number of competitors (default: 16)",
            "--rounds": "Fixed number of rounds (default: until one undefeated)",
            "--pattern": "Result pattern (random/skill/predictable)",
            "--draws": "Draw percentage (default: 0)",
            "--drops": "Drop percentage per competitor and round (default: 0)",
            "--seed": "Random seed for reproducibility",
            "--output": "Save the finished tournament to this JSON file",
            "--no-validate": "Skip the integrity audit",
        },
    },
    "validate": {
        "description": "Audit the pairing history of a saved tournament",
        "options": {
            "--file": "Tournament file to validate (JSON)",
            "--detailed": "Show every check, not only failures",
        },
    },
    "standings": {
        "description": "Print the standings of a saved tournament",
        "options": {
            "--file": "Tournament file (JSON)",
        },
    },
    "help": {
        "description": "Show help for specific command",
        "options": {
            "<command>": "Command name to get help for",
        },
    },
    "exit": {"description": "Exit the interactive mode", "options": {}},
}


def print_banner():
    """Print the application banner."""
    banner = f"""
{Colors.OKBLUE}+---------------------------------------------+
|            BO1 SWISS - TEST CLI             |
+---------------------------------------------+{Colors.ENDC}

Type {Colors.BOLD}/help{Colors.ENDC} to see all available commands
Type {Colors.BOLD}exit{Colors.ENDC} or {Colors.BOLD}quit{Colors.ENDC} to leave interactive mode
"""
    print(banner)


def print_commands_list():
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

    cmd_info = COMMANDS[command]
    print(f"\n{Colors.BOLD}{Colors.OKBLUE}Command: {command}{Colors.ENDC}")
    print(f"{Colors.BOLD}Description:{Colors.ENDC} {cmd_info['description']}\n")

    if cmd_info["options"]:
        print(f"{Colors.BOLD}Options:{Colors.ENDC}")
        for option, description in cmd_info["options"].items():
            print(f"  {Colors.OKCYAN}{option:16}{Colors.ENDC} {description}")
    print()


def create_completer() -> NestedCompleter:
    """Create autocomplete completer for interactive mode.

    Both ``command`` and ``/command`` forms complete.
    """
    completions = {}
    for cmd, info in COMMANDS.items():
        options_completer = (
            WordCompleter(list(info["options"].keys())) if info["options"] else None
        )
        completions[cmd] = options_completer
        completions[f"/{cmd}"] = options_completer

    completions["/help"] = WordCompleter(list(COMMANDS))
    completions["/list"] = None
    return NestedCompleter.from_nested_dict(completions)


def print_standings(tournament: Tournament) -> None:
    print(f"\n{Colors.BOLD}Standings after round {tournament.current_round}:{Colors.ENDC}")
    print(f"  {'#':>3}  {'Name':24} {'W-L-D':>8} {'Pts':>4} {'OMW%':>6} {'SOS':>4} {'MW%':>6}")
    for row in tournament.standings():
        record = f"{row.wins}-{row.losses}-{row.draws}"
        print(
            f"  {row.rank:>3}  {row.name:24} {record:>8} {row.points:>4} "
            f"{row.omw * 100:>5.1f}% {row.sos:>4} {row.match_win_rate * 100:>5.1f}%"
        )


def print_report(report: ValidationReport, detailed: bool = False) -> None:
    print(f"\n{Colors.BOLD}Integrity audit:{Colors.ENDC}")
    if report.violations:
        print(f"  {Colors.FAIL}Violations: {len(report.violations)}{Colors.ENDC}")
    if report.quality_warnings:
        print(
            f"  {Colors.WARNING}Quality warnings: {len(report.quality_warnings)}{Colors.ENDC}"
        )
    shown = report.results if detailed else report.violations + report.quality_warnings
    for result in shown:
        print(
            f"    round {result.round_number} {result.check:11} "
            f"{result.status.value:15} {result.description}"
        )
    print(f"  {report.summary}")


def run_simulate_command(args: argparse.Namespace) -> int:
    """Run the simulate (RTG) command."""
    config = RTGConfig(
        num_players=args.players,
        num_rounds=args.rounds,
        result_pattern=ResultPattern(args.pattern),
        draw_percentage=args.draws,
        drop_percentage=args.drops,
        seed=args.seed,
        validate=not args.no_validate,
    )

    print(f"\n{Colors.BOLD}Simulating tournament...{Colors.ENDC}")
    result = RandomTournamentGenerator(config).generate_complete_tournament()
    tournament = result.tournament

    print(f"  Competitors: {len(tournament.competitors)}")
    print(f"  Rounds played: {result.rounds_played}")
    if result.stopped_early:
        print(f"  {Colors.WARNING}Stopped before completion{Colors.ENDC}")
    if result.champion is not None:
        print(f"  {Colors.OKGREEN}Champion: {result.champion.name}{Colors.ENDC}")

    print_standings(tournament)
    if result.report is not None:
        print_report(result.report)

    if args.output:
        path = save_tournament(tournament, args.output)
        print(f"{Colors.OKGREEN}Tournament saved to: {path}{Colors.ENDC}")

    if result.report is not None and not result.report.is_valid:
        return 1
    return 0


def run_validate_command(args: argparse.Namespace) -> int:
    """Run the validation command."""
    tournament = load_tournament(args.file)
    print(f"\n{Colors.BOLD}Validating tournament: {tournament.name}{Colors.ENDC}")
    report = validate_tournament(tournament)
    print_report(report, detailed=args.detailed)
    return 0 if report.is_valid else 1


def run_standings_command(args: argparse.Namespace) -> int:
    tournament = load_tournament(args.file)
    print(f"\n{Colors.BOLD}{tournament.name}{Colors.ENDC} ({tournament.state})")
    print_standings(tournament)
    champion = tournament.champion()
    if champion is not None:
        print(f"\n  {Colors.OKGREEN}Champion: {champion.name}{Colors.ENDC}")
    return 0


def add_simulate_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--players", type=int, default=16, help="Number of competitors")
    parser.add_argument(
        "--rounds",
        type=int,
        default=None,
        help="Fixed number of rounds (default: until one undefeated)",
    )
    parser.add_argument(
        "--pattern",
        choices=[p.value for p in ResultPattern],
        default=ResultPattern.SKILL.value,
        help="Result pattern",
    )
    parser.add_argument("--draws", type=int, default=0, help="Draw percentage")
    parser.add_argument("--drops", type=int, default=0, help="Drop percentage")
    parser.add_argument("--seed", type=int, help="Random seed")
    parser.add_argument("--output", help="Output file path")
    parser.add_argument(
        "--no-validate", action="store_true", help="Skip the integrity audit"
    )


def add_validate_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--file", required=True, help="Tournament file (JSON)")
    parser.add_argument("--detailed", action="store_true", help="Show every check")


def add_standings_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--file", required=True, help="Tournament file (JSON)")


SUBCOMMANDS = {
    "simulate": (add_simulate_arguments, run_simulate_command),
    "validate": (add_validate_arguments, run_validate_command),
    "standings": (add_standings_arguments, run_standings_command),
}


def create_main_parser() -> argparse.ArgumentParser:
    """Create main argument parser."""
    parser = argparse.ArgumentParser(
        prog="bo1swiss-sim",
        description="Testing CLI for the Bo1 Swiss pairing engine",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Interactive mode
  bo1swiss-sim

  # Play 12 competitors until one is undefeated
  bo1swiss-sim simulate --players 12 --seed 7

  # Five fixed rounds with draws, saved to disk
  bo1swiss-sim simulate --players 24 --rounds 5 --draws 10 --output event.json

  # Audit a saved tournament
  bo1swiss-sim validate --file event.json
        """,
    )
    parser.add_argument(
        "--interactive", "-i", action="store_true", help="Start in interactive mode"
    )
    parser.add_argument("--log-level", help="Logging level (DEBUG, INFO, ...)")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")
    for name, (add_arguments, handler) in SUBCOMMANDS.items():
        sub = subparsers.add_parser(name, help=COMMANDS[name]["description"])
        add_arguments(sub)
        sub.set_defaults(func=handler)
    return parser


def run_command(command: str, args_list: List[str]) -> int:
    """Parse ``args_list`` for ``command`` and run it."""
    add_arguments, handler = SUBCOMMANDS[command]
    parser = argparse.ArgumentParser(prog=command, description=COMMANDS[command]["description"])
    add_arguments(parser)
    return handler(parser.parse_args(args_list))


def run_interactive_mode() -> int:
    """Run in interactive mode with autocomplete."""
    print_banner()

    style = Style.from_dict({"prompt": "#00aa00 bold"})
    session = PromptSession(
        completer=create_completer(),
        history=InMemoryHistory(),
        style=style,
    )

    while True:
        try:
            user_input = session.prompt("bo1swiss> ").strip()
            if not user_input:
                continue

            if user_input in ["exit", "quit", "q", "/exit"]:
                print(f"\n{Colors.OKGREEN}Goodbye!{Colors.ENDC}\n")
                break

            parts = shlex.split(user_input)
            command = parts[0].lstrip("/")

            if command in ["help", "list", "?"]:
                if len(parts) > 1:
                    print_command_help(parts[1].lstrip("/"))
                else:
                    print_commands_list()
                continue

            if command not in SUBCOMMANDS:
                print(f"{Colors.FAIL}Unknown command: {command}{Colors.ENDC}")
                print(f"Type {Colors.BOLD}/help{Colors.ENDC} to see available commands")
                continue

            try:
                run_command(command, parts[1:])
            except SystemExit:
                # argparse exits on bad arguments
                continue
            except Bo1SwissException as e:
                print(f"{Colors.FAIL}Error: {e}{Colors.ENDC}")

        except KeyboardInterrupt:
            print(f"\n{Colors.WARNING}Use 'exit' or 'quit' to leave{Colors.ENDC}")
        except EOFError:
            print(f"\n{Colors.OKGREEN}Goodbye!{Colors.ENDC}\n")
            break
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for bo1swiss-sim CLI."""
    argv = sys.argv[1:] if argv is None else argv
    parser = create_main_parser()
    args = parser.parse_args(argv)

    if args.log_level:
        set_log_level(args.log_level)

    if not argv or args.interactive:
        return run_interactive_mode()

    if not hasattr(args, "func"):
        parser.print_help()
        return 0

    try:
        return args.func(args)
    except Bo1SwissException as e:
        print(f"{Colors.FAIL}Error: {e}{Colors.ENDC}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
