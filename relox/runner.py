"""
Driver for the relox pipeline.

Runs scan, parse and interpret over one source string, reports every error
as ``[line N] Error: <message>`` and classifies the outcome so callers can
map it to a process exit status.

Author: relox developers
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, TextIO

from .lexer import scan
from .lexer.errors import LoxError, ScanError
from .parser import Parser, pretty_print
from .parser.errors import ParseError
from .interpreter import Interpreter
from .interpreter.errors import LoxRuntimeError

logger = logging.getLogger(__name__)


class RunStatus(Enum):
    """Outcome of running a source string, valued by its exit code."""
    OK = 0
    STATIC_ERROR = 65
    RUNTIME_ERROR = 70

    @property
    def exit_code(self) -> int:
        return self.value


# Command line misuse
USAGE_EXIT_CODE = 64


@dataclass
class RunResult:
    """Status of a run plus every error that was reported."""
    status: RunStatus
    errors: List[LoxError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.status is RunStatus.OK

    @property
    def exit_code(self) -> int:
        return self.status.exit_code


def run(
    source: str,
    output: TextIO,
    interpreter: Optional[Interpreter] = None,
    error_output: Optional[TextIO] = None,
) -> RunResult:
    """
    Scan, parse and interpret a source string.

    Language errors are never raised; they are written to ``error_output``
    (``output`` when not given) and reflected in the returned status.

    Args:
        source: Lox program text
        output: Stream receiving ``print`` output when no interpreter is
            given, and error reports when ``error_output`` is omitted
        interpreter: Interpreter to reuse, e.g. across REPL lines. It keeps
            writing ``print`` output to its own stream, not to ``output``.
            A fresh one writing to ``output`` is created when omitted
        error_output: Stream receiving error reports

    Returns:
        RunResult with the outcome and the reported errors
    """
    if error_output is None:
        error_output = output
    if interpreter is None:
        interpreter = Interpreter(output)

    try:
        statements = Parser(scan(source)).parse()
    except ScanError as e:
        return _report(RunStatus.STATIC_ERROR, [e], error_output)
    except ParseError as e:
        return _report(RunStatus.STATIC_ERROR, e.errors, error_output)

    try:
        interpreter.interpret(statements)
    except LoxRuntimeError as e:
        return _report(RunStatus.RUNTIME_ERROR, [e], error_output)

    return RunResult(RunStatus.OK)


def run_file(path: str, output: TextIO, error_output: Optional[TextIO] = None) -> RunResult:
    """Read a UTF-8 script and run it with a fresh interpreter."""
    with open(path, 'r', encoding='utf-8') as f:
        source = f.read()
    logger.info("running %s", path)
    return run(source, output, error_output=error_output)


def dump_ast(source: str) -> List[str]:
    """
    Return the canonical printed form of each statement in ``source``.

    Raises:
        ScanError: If lexing fails
        ParseError: If parsing fails
    """
    return [pretty_print(statement) for statement in Parser(scan(source)).parse()]


def _report(status: RunStatus, errors: List[LoxError], sink: TextIO) -> RunResult:
    for error in errors:
        logger.debug("reporting %s", error.__class__.__name__)
        sink.write(f"{error}\n")
    sink.flush()
    return RunResult(status, list(errors))
