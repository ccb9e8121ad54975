"""Convert an HSL colour to an 8-bit RGB triple.

Hue is in degrees and wraps modulo 360 (-30 and 330 are the same hue).
Saturation and lightness are fractions 0..1; out-of-range values are
clamped unless HSL_TOOL_STRICT is set, in which case they are rejected.

Example:
    uv run hsl-tool to-rgb 210 0.5 0.4
    uv run hsl-tool to-rgb -30 1 0.5 --json
"""

from dataclasses import asdict

from hsl_colour.core.env import Settings
from hsl_colour.core.hsl import HSL, validate_hsl
from hsl_colour.core.types import Command, Report

command = Command(
    name='to-rgb',
    help='Convert HSL (degrees, 0..1, 0..1) to RGB (0..255).',
)


@command.arguments
def add_arguments(parser) -> None:
    parser.add_argument('hue', type=float, help='Hue in degrees (wraps modulo 360)')
    parser.add_argument('saturation', type=float, help='Saturation 0..1')
    parser.add_argument('lightness', type=float, help='Lightness 0..1')


@command.run
def run(report: Report, args) -> None:
    settings = getattr(args, 'settings', None) or Settings()
    if settings.strict:
        validate_hsl(args.hue, args.saturation, args.lightness)

    hsl = HSL(args.hue, args.saturation, args.lightness)
    rgb = hsl.to_rgb()
    report.add('rgb', {'input': asdict(hsl), 'rgb': list(rgb)})
