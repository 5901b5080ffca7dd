"""
Command line interface for relox.

    relox run [SCRIPT]    run a script, or start a prompt when none is given
    relox ast SCRIPT      print the parenthesized form of every statement

Author: relox developers
"""

import logging
import sys

import click

from . import __version__
from .interpreter import Interpreter
from .lexer.errors import ScanError
from .parser.errors import ParseError
from .runner import RunStatus, USAGE_EXIT_CODE, dump_ast, run

logger = logging.getLogger(__name__)

LOG_LEVELS = {0: logging.WARNING, 1: logging.INFO}

PROMPT = "> "


class LoxGroup(click.Group):
    """Command group that exits with the sysexits usage code on bad invocations."""

    def make_context(self, *args, **kwargs):
        try:
            return super().make_context(*args, **kwargs)
        except click.UsageError as e:
            e.exit_code = USAGE_EXIT_CODE
            raise

    def invoke(self, ctx):
        try:
            return super().invoke(ctx)
        except click.UsageError as e:
            e.exit_code = USAGE_EXIT_CODE
            raise


def configure_logging(verbose: int) -> None:
    level = LOG_LEVELS.get(verbose, logging.DEBUG)
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


def read_script(ctx: click.Context, path: str) -> str:
    """Read a UTF-8 script; undecodable input exits with the data error status."""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return f.read()
    except UnicodeDecodeError as e:
        click.echo(f"Error: {path} is not valid UTF-8 (byte {e.start})", err=True)
        ctx.exit(RunStatus.STATIC_ERROR.exit_code)


@click.group(cls=LoxGroup, invoke_without_command=True)
@click.option('--verbose', '-v', default=0, count=True, help='Increase log verbosity (-v info, -vv debug).')
@click.version_option(__version__, prog_name="relox")
@click.pass_context
def cli(ctx: click.Context, verbose: int):
    """Scan, parse and evaluate Lox programs."""
    configure_logging(verbose)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit(USAGE_EXIT_CODE)


@cli.command("run")
@click.argument('script', required=False, type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def run_command(ctx: click.Context, script):
    """Run SCRIPT, or read statements from standard input line by line."""
    if script is None:
        run_prompt()
        return

    source = read_script(ctx, script)
    result = run(source, sys.stdout, error_output=sys.stderr)
    ctx.exit(result.exit_code)


@cli.command("ast")
@click.argument('script', type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def ast_command(ctx: click.Context, script):
    """Print the syntax tree of every statement in SCRIPT."""
    source = read_script(ctx, script)

    try:
        lines = dump_ast(source)
    except ScanError as e:
        click.echo(str(e), err=True)
        ctx.exit(RunStatus.STATIC_ERROR.exit_code)
    except ParseError as e:
        for error in e.errors:
            click.echo(str(error), err=True)
        ctx.exit(RunStatus.STATIC_ERROR.exit_code)

    for line in lines:
        click.echo(line)


def run_prompt() -> None:
    """
    Interactive prompt.

    Each line is run on its own against one interpreter, so definitions
    persist between lines. Errors are reported and the prompt continues
    until end of input.
    """
    interpreter = Interpreter(sys.stdout)

    while True:
        click.echo(PROMPT, nl=False)
        line = sys.stdin.readline()
        if not line:
            click.echo()
            break

        result = run(line, sys.stdout, interpreter=interpreter, error_output=sys.stderr)
        if not result.ok:
            logger.info("line finished with %s", result.status.name)


def main():
    cli(prog_name="relox")


if __name__ == "__main__":
    main()
