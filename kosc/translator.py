"""
Translator facade.

Parses a whole program and renders it in the target dialect. Translation is
all-or-nothing: a ParseError anywhere means no output at all.
"""

from __future__ import annotations

from .core.config import Settings, get_settings
from .core.errors import ParseError
from .core.logging import get_logger
from .parser import CodeGenerator, CompoundStatement, Parser

logger = get_logger(__name__)


def parse(source: str, settings: Settings | None = None) -> CompoundStatement:
    """
    Parse ``source`` into its top-level compound statement.

    Raises:
        ParseError: If the input is not entirely made of valid statements
    """
    settings = settings or get_settings()

    try:
        program = Parser(context_width=settings.CONTEXT_WIDTH).parse(source)
    except ParseError as exc:
        logger.info(
            "Parse failed: %s",
            exc.message,
            extra={"source_length": len(source), **exc.details},
        )
        raise

    logger.debug(
        "Parsed program",
        extra={"source_length": len(source), "statements": len(program.statements)},
    )
    return program


def render(program: CompoundStatement) -> str:
    """Render a parsed program as target-dialect text."""
    return CodeGenerator().generate(program)


def translate(source: str, settings: Settings | None = None) -> str:
    """
    Translate a complete program.

    Args:
        source: Program text
        settings: Settings to use (defaults to the cached settings)

    Returns:
        The rendered program, one generated statement per line

    Raises:
        ParseError: If the input is not entirely made of valid statements
    """
    return render(parse(source, settings))
