"""hsl_colour.core — Foundation layer.

Contains the HSL value type and conversions, command/report types, env loading
and the report builder.
This module has NO dependencies on hsl_colour.commands or hsl_colour.registry.
Only stdlib is allowed in hsl.py; numpy is used by commands and tests only.
"""
