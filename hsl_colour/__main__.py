"""hsl-tool — Convert colours between HSL and 8-bit RGB.

Usage: uv run hsl-tool <command> <args> [options]

Commands are auto-discovered from hsl_colour/commands/.
Each command module's docstring is its documentation.
Run `hsl-tool help <command>` for full module docs.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, hsl-tool looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
"""

import argparse
import sys

from hsl_colour import registry
from hsl_colour.core.env import load_env, load_settings
from hsl_colour.core.hsl import ColourRangeError
from hsl_colour.core.report import format_json, format_text
from hsl_colour.core.types import Report


def _short_help(name: str) -> str:
    doc = registry.module_doc(name)
    return doc.splitlines()[0] if doc else registry.get(name).help


def _build_parser() -> argparse.ArgumentParser:
    commands = registry.all_commands()

    epilog = (
        'Examples:\n'
        '  hsl-tool to-rgb 210 0.5 0.4\n'
        '  hsl-tool to-rgb -30 1 0.5 --json\n'
        '  hsl-tool from-rgb 186 218 85\n'
        '  hsl-tool check --samples 100000\n'
        '  hsl-tool check --exhaustive\n'
        '  hsl-tool help check\n'
        '\n'
        'Settings (set in .env or environment):\n'
        '  HSL_TOOL_PRECISION=2   decimal places for HSL output\n'
        '  HSL_TOOL_STRICT=1      reject out-of-range inputs instead of clamping\n'
        '  HSL_TOOL_SAMPLES=5000  default sample size for check\n'
    )
    parser = argparse.ArgumentParser(
        prog='hsl-tool',
        description='Convert colours between HSL and 8-bit RGB.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    # Global --env-file option before subcommand
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    sub = parser.add_subparsers(dest='command', help='Command to run')

    for name, cmd in sorted(commands.items()):
        p = sub.add_parser(name, help=_short_help(name))
        cmd.add_arguments(p)
        p.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')

    # `help` subcommand — prints full module docstring for a command
    help_parser = sub.add_parser('help', help='Print full docs for a command')
    help_parser.add_argument('topic', nargs='?', help='Command name')

    return parser


def _print_help(topic: str | None) -> None:
    """Print full module docstring for a command."""
    commands = registry.all_commands()

    if topic is None:
        print('Available commands:\n')
        for name in sorted(commands):
            print(f'  {name:<10} {_short_help(name)}')
        print('\nRun: hsl-tool help <command> for full docs.')
        return

    if topic not in commands:
        print(f'Unknown command: {topic}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(commands))}', file=sys.stderr)
        sys.exit(1)

    doc = registry.module_doc(topic)
    if not doc:
        print(f'(No module docs for {topic!r})')
        return
    print(doc)


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    # Load .env before anything else — OS env vars always win
    env_path = load_env(env_file=args.env_file)
    if env_path:
        print(f'hsl-tool: loaded {env_path}', file=sys.stderr)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == 'help':
        _print_help(args.topic)
        return

    settings = load_settings()
    args.settings = settings

    report = Report(command=args.command)
    cmd = registry.get(args.command)
    try:
        cmd.execute(report, args)
        output = format_json(report) if args.json else format_text(report, precision=settings.precision)
    except ColourRangeError as e:
        print(f'Error: {e}', file=sys.stderr)
        sys.exit(1)

    print(output)

    # Round-trip failures gate CI — after output so the report is visible
    if report.fail_count:
        sys.exit(1)


if __name__ == '__main__':
    main()
