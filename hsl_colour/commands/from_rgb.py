"""Convert an 8-bit RGB triple to HSL.

Channels are integers 0..255; out-of-range values are clamped unless
HSL_TOOL_STRICT is set. Greys (r == g == b) report hue 0 and saturation 0.

Example:
    uv run hsl-tool from-rgb 186 218 85
    uv run hsl-tool from-rgb 255 255 0 --json
"""

from dataclasses import asdict

from hsl_colour.core.env import Settings
from hsl_colour.core.hsl import from_rgb, validate_rgb
from hsl_colour.core.types import Command, Report

command = Command(
    name='from-rgb',
    help='Convert RGB (0..255) to HSL.',
)


@command.arguments
def add_arguments(parser) -> None:
    parser.add_argument('red', type=int, help='Red 0..255')
    parser.add_argument('green', type=int, help='Green 0..255')
    parser.add_argument('blue', type=int, help='Blue 0..255')


@command.run
def run(report: Report, args) -> None:
    settings = getattr(args, 'settings', None) or Settings()
    if settings.strict:
        validate_rgb(args.red, args.green, args.blue)

    hsl = from_rgb(args.red, args.green, args.blue)
    report.add('hsl', {'input': [args.red, args.green, args.blue], 'hsl': asdict(hsl)})
