"""CLI adapter for ``lib_exception_assert`` built on ``lib_cli_exit_tools``.

Purpose
-------
Check from a shell (or a CI smoke step) that a callable raises the exception
it is supposed to, using the same verifier the Python API uses.

Contents
--------
* :data:`CLICK_CONTEXT_SETTINGS` – shared Click settings ensuring ``-h`` works.
* :func:`cli` – root command that wires global traceback handling into
  ``lib_cli_exit_tools``.
* :func:`cli_info` – prints distribution metadata for quick diagnostics.
* :func:`cli_verify` – imports ``module:callable``, verifies the exception it
  raises and prints it as JSON.
* :func:`main` – entry point used by ``console_scripts`` registration.

System Role
-----------
Outermost layer. It only calls the composition root (:mod:`.core`); mismatches
surface as :class:`~lib_exception_assert.domain.errors.ExpectationFailed` and
``lib_cli_exit_tools`` turns them into a non-zero exit code.
"""

from __future__ import annotations

import builtins
import json
import sys
from importlib import import_module, metadata
from typing import Final, Optional, Sequence

import lib_cli_exit_tools
import rich_click as click

from .application.verify import type_name
from .core import throws, throws_async
from .domain.errors import TargetResolutionError
from .domain.options import InheritanceMode, MessageCompareMode

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}
_TRACEBACK_SUMMARY_LIMIT: Final[int] = 500
_TRACEBACK_VERBOSE_LIMIT: Final[int] = 10_000

MESSAGE_MODE_CHOICES: Final[tuple[str, ...]] = tuple(mode.value for mode in MessageCompareMode)
INHERITANCE_CHOICES: Final[tuple[str, ...]] = tuple(mode.value for mode in InheritanceMode)


def _resolve_version() -> str:
    """Return the installed package version, ``"0.0.0"`` when not installed."""

    try:
        return metadata.version("lib_exception_assert")
    except metadata.PackageNotFoundError:
        return "0.0.0"


@click.group(
    help="Verify that callables raise the exceptions they promise",
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=False,
)
@click.version_option(
    version=_resolve_version(),
    prog_name="lib_exception_assert",
    message="lib_exception_assert version %(version)s",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool) -> None:
    """Root command configuring traceback handling for all subcommands.

    Side Effects
        Mutates ``lib_cli_exit_tools.config.traceback`` and
        ``lib_cli_exit_tools.config.traceback_force_color``.
    """

    ctx.ensure_object(dict)
    ctx.obj["traceback"] = traceback
    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print basic distribution metadata so users can confirm installation."""

    try:
        meta = metadata.metadata("lib_exception_assert")
    except metadata.PackageNotFoundError:
        click.echo("lib_exception_assert (metadata unavailable)")
        return
    click.echo(f"Info for {meta.get('Name', 'lib_exception_assert')}:")
    click.echo(f"  Version         : {meta.get('Version', _resolve_version())}")
    click.echo(f"  Requires-Python : {meta.get('Requires-Python', '>=3.11')}")
    summary = meta.get("Summary")
    if summary:
        click.echo(f"  Summary         : {summary}")
    for entry in meta.get_all("Project-URL") or []:
        click.echo(f"  {entry}")


@cli.command("verify", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("target")
@click.option(
    "--expect",
    default=None,
    help="Expected exception class: a builtin name (ValueError) or module:Class. Any exception if omitted",
)
@click.option("--message", default=None, help="Expected exception message")
@click.option(
    "--mode",
    type=click.Choice(MESSAGE_MODE_CHOICES, case_sensitive=False),
    default=None,
    help="Message comparison (defaults to exact when --message is given)",
)
@click.option(
    "--inheritance",
    type=click.Choice(INHERITANCE_CHOICES, case_sensitive=False),
    default=InheritanceMode.INHERITS.value,
    show_default=True,
    help="Accept subclasses of the expected type or require the exact type",
)
@click.option(
    "--async/--no-async",
    "is_async",
    default=False,
    show_default=True,
    help="Call TARGET and await the awaitable it returns",
)
def cli_verify(
    target: str,
    expect: Optional[str],
    message: Optional[str],
    mode: Optional[str],
    inheritance: str,
    is_async: bool,
) -> None:
    """Run TARGET (``module:callable``) and verify the exception it raises.

    Prints ``{"type": ..., "message": ...}`` for the captured exception. A
    mismatch exits with a non-zero status.
    """

    operation = _resolve_reference(target)
    if not callable(operation):
        raise click.BadParameter(f"{target} is not callable", param_hint="TARGET")
    expected_type = _resolve_exception_type(expect)
    if is_async:
        captured = throws_async(
            operation(), expected_type, message, message_mode=mode, inheritance_mode=inheritance
        )
    else:
        captured = throws(operation, expected_type, message, message_mode=mode, inheritance_mode=inheritance)
    click.echo(json.dumps({"type": type_name(type(captured)), "message": str(captured)}))


def _resolve_reference(reference: str) -> object:
    """Import ``module:attribute`` (attribute may be dotted) and return it."""

    module_name, sep, attribute = reference.partition(":")
    if not sep or not module_name or not attribute:
        raise TargetResolutionError(f"Expected module:attribute, got {reference!r}")
    try:
        resolved: object = import_module(module_name)
    except ImportError as exc:
        raise TargetResolutionError(f"Cannot import module {module_name!r}: {exc}") from exc
    for part in attribute.split("."):
        try:
            resolved = getattr(resolved, part)
        except AttributeError as exc:
            raise TargetResolutionError(f"{module_name!r} has no attribute {attribute!r}") from exc
    return resolved


def _resolve_exception_type(name: Optional[str]) -> Optional[type[BaseException]]:
    """Return the exception class named by *name*, or ``None`` for any exception."""

    if name is None or not name.strip():
        return None
    name = name.strip()
    candidate = _resolve_reference(name) if ":" in name else getattr(builtins, name, None)
    if isinstance(candidate, type) and issubclass(candidate, BaseException):
        return candidate
    raise click.BadParameter(f"{name} is not an exception class", param_hint="--expect")


def main(argv: Optional[Sequence[str]] = None, *, restore_traceback: bool = True) -> int:
    """Execute the CLI with shared exit handling and return the exit code."""

    previous_traceback = getattr(lib_cli_exit_tools.config, "traceback", False)
    previous_force_color = getattr(lib_cli_exit_tools.config, "traceback_force_color", False)
    try:
        try:
            return lib_cli_exit_tools.run_cli(
                cli,
                argv=list(argv) if argv is not None else None,
                prog_name="lib_exception_assert",
            )
        except BaseException as exc:  # noqa: BLE001 - funnel through shared printers
            lib_cli_exit_tools.print_exception_message(
                trace_back=lib_cli_exit_tools.config.traceback,
                length_limit=(
                    _TRACEBACK_VERBOSE_LIMIT if lib_cli_exit_tools.config.traceback else _TRACEBACK_SUMMARY_LIMIT
                ),
            )
            return lib_cli_exit_tools.get_system_exit_code(exc)
    finally:
        if restore_traceback:
            lib_cli_exit_tools.config.traceback = previous_traceback
            lib_cli_exit_tools.config.traceback_force_color = previous_force_color


if __name__ == "__main__":  # pragma: no cover - exercised via console entry point
    raise SystemExit(main(sys.argv[1:]))
