"""
CLI utilities for rebuilding the invocation written into generated files.
"""

from pathlib import Path

import click

DEFAULT_COMMAND = "discovery_to_code"


def _display_value(value) -> str:
    # Paths are shown by file name only so generated headers do not leak local directories
    if isinstance(value, (str, Path)):
        path_obj = Path(str(value))
        return path_obj.name if path_obj.is_absolute() or path_obj.exists() else str(value)
    return str(value)


def reconstruct_command_line(click_command: click.Command) -> str:
    """
    Rebuild the command line of the running click command.

    Arguments come first in declaration order, then options whose value
    differs from their default. Boolean flags are written without a value.

    Args:
        click_command: Click command whose parameters should be listed

    Returns:
        Command line string, or just the command name outside a click context
    """
    ctx = click.get_current_context(silent=True)
    if ctx is None or not ctx.params:
        return DEFAULT_COMMAND

    arguments: list[str] = []
    options: list[str] = []

    for param in click_command.params:
        value = ctx.params.get(param.name)
        if value is None or value is False or value == ():
            continue

        if isinstance(param, click.Argument):
            arguments.append(_display_value(value))
            continue

        if isinstance(param, click.Option):
            if value == param.default:
                continue
            flag = param.opts[0] if param.opts else f"--{param.name}"
            if param.is_flag:
                options.append(flag)
            else:
                options.extend([flag, _display_value(value)])

    return " ".join([DEFAULT_COMMAND, *arguments, *options])
