"""hsl-tool subcommands.

Every module in this package that defines a `command` object is
registered by hsl_colour.registry.discover().
"""
