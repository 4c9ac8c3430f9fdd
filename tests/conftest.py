"""
Shared pytest fixtures for the translator tests.

This module provides:
- A fresh statement parser per test
- Helpers to parse and render single expressions
- Isolation of root logger changes made by ``setup_logging``
"""

import logging

import pytest

from kosc.parser import CodeGenerator, Parser
from kosc.parser.expression import ExpressionParser


@pytest.fixture
def parser() -> Parser:
    """A fresh program parser."""
    return Parser()


@pytest.fixture
def parse_expression():
    """Parse one expression and return ``(node, end_offset)``."""
    def _parse(text: str):
        expression_parser = ExpressionParser()
        expression_parser.reset(text)
        node = expression_parser.parse_expression()
        return node, expression_parser.pos
    return _parse


@pytest.fixture
def render_expression(parse_expression):
    """Parse a complete expression and render it in the target dialect."""
    def _render(text: str) -> str:
        node, end = parse_expression(text)
        assert end == len(text), f"expression stopped at offset {end}: {text[end:]!r}"
        return CodeGenerator().generate(node)
    return _render


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo handler and level changes made to the root logger during a test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level

    yield

    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)
