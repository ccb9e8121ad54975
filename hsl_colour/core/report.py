"""Report builder — text and JSON output for hsl-tool results."""

import json
from typing import Any

from hsl_colour.core.hsl import ColourRangeError
from hsl_colour.core.types import Report


def _format_hsl(hsl: dict[str, float], precision: int) -> str:
    return (
        f'hsl({hsl["hue"]:.{precision}f}°, '
        f'{hsl["saturation"]:.{precision}f}, '
        f'{hsl["lightness"]:.{precision}f})'
    )


def _format_rgb(rgb: list[int]) -> str:
    return f'rgb({rgb[0]}, {rgb[1]}, {rgb[2]})'


def format_text(report: Report, precision: int = 2) -> str:
    """Format report as human-readable text."""
    lines = []
    for entry in report.results:
        kind = entry.get('kind')
        if kind == 'rgb':
            lines.append(f'{_format_hsl(entry["input"], precision)} → {_format_rgb(entry["rgb"])}')
        elif kind == 'hsl':
            lines.append(f'{_format_rgb(entry["input"])} → {_format_hsl(entry["hsl"], precision)}')
        elif kind == 'mismatch':
            lines.append(
                f'✗ {_format_rgb(entry["input"])} → {_format_hsl(entry["hsl"], precision)}'
                f' → {_format_rgb(entry["output"])}'
            )
        else:
            # Generic fallback
            for k, v in entry.items():
                if k != 'kind':
                    lines.append(f'  {kind}.{k}: {v}')

    if report.summary:
        checked = report.summary.get('checked', 0)
        mode = report.summary.get('mode', '?')
        lines.append(f'checked {checked} triples ({mode})')

    total = report.pass_count + report.fail_count
    if total > 0:
        lines.append(f'PASS {report.pass_count}/{total}  FAIL {report.fail_count}/{total}')
    return '\n'.join(lines)


def format_json(report: Report) -> str:
    """Format report as JSON. Raises ColourRangeError on NaN or infinity, which JSON cannot carry."""
    obj: dict[str, Any] = {
        'command': report.command,
        'results': report.results,
    }
    if report.summary:
        obj['summary'] = {
            **report.summary,
            'pass': report.pass_count,
            'fail': report.fail_count,
        }
    try:
        return json.dumps(obj, indent=2, allow_nan=False)
    except ValueError as e:
        raise ColourRangeError(f'non-finite value in report: {e}') from e
