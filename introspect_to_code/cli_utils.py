"""
CLI utilities for command line reconstruction.
"""

from pathlib import Path

import click

PROG_NAME = "introspect_to_code"


def reconstruct_command_line() -> str:
    """
    Reconstruct the command line from the current Click context.

    File paths are shortened to their names so the generated files do not
    depend on where they were generated.

    Returns:
        Reconstructed command line, or the program name outside of a command
    """
    ctx = click.get_current_context(silent=True)
    if ctx is None or not ctx.params:
        return PROG_NAME

    arguments = []
    options = []
    for param in ctx.command.params:
        value = ctx.params.get(param.name)
        if not value or isinstance(param, click.Option) and value == param.default:
            continue

        if isinstance(value, (str, Path)) and Path(str(value)).exists():
            value = Path(str(value)).name

        if isinstance(param, click.Argument):
            arguments.append(str(value))
        elif param.is_flag:
            options.append(param.opts[0])
        else:
            options.extend([param.opts[0], str(value)])

    return " ".join([PROG_NAME, *arguments, *options])
