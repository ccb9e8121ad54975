"""Command auto-discovery and registration.

Scans hsl_colour/commands/ for modules that define a `command` object
of type Command, keyed by the command's name. Module docstrings double
as the long help text printed by `hsl-tool help <command>`.
"""

import importlib
import pkgutil
from types import ModuleType

from hsl_colour.core.types import Command

_registry: dict[str, Command] = {}
_modules: dict[str, ModuleType] = {}


def discover() -> dict[str, Command]:
    """Import all command modules and return the registry."""
    if _registry:
        return _registry

    import hsl_colour.commands as pkg

    for _importer, modname, _ispkg in pkgutil.iter_modules(pkg.__path__):
        if modname.startswith('_'):
            continue
        module = importlib.import_module(f'hsl_colour.commands.{modname}')
        cmd = getattr(module, 'command', None)
        if isinstance(cmd, Command):
            _registry[cmd.name] = cmd
            _modules[cmd.name] = module

    return _registry


def get(name: str) -> Command:
    """Get a command by name."""
    reg = discover()
    if name not in reg:
        raise KeyError(f'Unknown command: {name}. Available: {", ".join(sorted(reg))}')
    return reg[name]


def module_doc(name: str) -> str:
    """Return the stripped module docstring of a registered command."""
    get(name)
    return (_modules[name].__doc__ or '').strip()


def all_commands() -> dict[str, Command]:
    """Return all registered commands."""
    return discover()
