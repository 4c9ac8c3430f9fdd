"""
Statement parser.

Each statement form is an independent recognizer; ``parse_statement`` tries
them in order:

    declaration   var NAME [= expr] ;
    assignment    NAME = expr ;
    lock          assign NAME = expr ;
    print         print ( param-list ) ;
    while         while expr { compound }
    for           for declaration condition ; NAME = expr { compound }

A compound statement is zero or more statements separated by optional line
endings. The program is the top-level compound, and it must consume the
whole input.
"""

from ..core.errors import ParseError
from .ast import (
    CompoundStatement,
    Expression,
    ForStatement,
    LockStatement,
    PrintStatement,
    Statement,
    VariableAssign,
    VariableDeclaration,
    WhileStatement,
)
from .expression import ExpressionParser


class Parser(ExpressionParser):
    """
    Parser for whole programs.

    A single instance may parse several sources one after another; each call
    to ``parse`` starts from a clean state.
    """

    def __init__(self, context_width: int = 20):
        """
        Initialize parser.

        Args:
            context_width: Characters of remaining input quoted in a ParseError
        """
        super().__init__()
        self.context_width = context_width

    def parse(self, source: str) -> CompoundStatement:
        """
        Parse a program.

        Args:
            source: The complete program text

        Returns:
            The top-level compound statement

        Raises:
            ParseError: If any part of ``source`` is not a valid statement,
                or brackets nest deeper than the interpreter stack allows
        """
        self.reset(source)

        try:
            program = self.parse_compound()
        except RecursionError:
            # The cursor is left where the stack ran out.
            raise ParseError.at(
                source,
                self.pos,
                {"shallower nesting"},
                width=self.context_width,
            ) from None
        self.multispace0()

        if not self.at_end():
            self.expect("statement")
            raise ParseError.at(
                source,
                self.furthest,
                self.expected,
                width=self.context_width,
            )

        return program

    def parse_compound(self) -> CompoundStatement:
        start = self.pos
        statements = self.many0(self._compound_item)
        return CompoundStatement(tuple(statements), pos=start)

    def _compound_item(self) -> Statement:
        self.multispace0()
        statement = self.parse_statement()
        self.optional(self.line_ending)
        return statement

    def parse_statement(self) -> Statement:
        self.space0()
        statement = self.choice(
            self.parse_declaration,
            self.parse_assignment,
            self.parse_lock,
            self.parse_print,
            self.parse_while,
            self.parse_for,
        )
        self.space0()
        return statement

    def parse_declaration(self) -> VariableDeclaration:
        start = self.pos
        self.tag("var")
        self.space1()
        identifier = self.identifier()
        init = self.optional(self._initializer)
        self._terminator()
        return VariableDeclaration(identifier, init, pos=start)

    def _initializer(self) -> Expression:
        self.space0()
        self.tag("=")
        self.space0()
        return self.parse_expression()

    def parse_assignment(self) -> VariableAssign:
        start = self.pos
        identifier, value = self._binding()
        self._terminator()
        return VariableAssign(identifier, value, pos=start)

    def parse_lock(self) -> LockStatement:
        # "assign" introduces LOCK; the keyword-less form is the SET assignment
        start = self.pos
        self.tag("assign")
        self.space1()
        identifier, value = self._binding()
        self._terminator()
        return LockStatement(identifier, value, pos=start)

    def _binding(self) -> tuple[str, Expression]:
        """Parse ``NAME = expr``."""
        identifier = self.identifier()
        return identifier, self._initializer()

    def _terminator(self) -> None:
        self.space0()
        self.tag(";")

    def parse_print(self) -> PrintStatement:
        start = self.pos
        self.tag("print")
        self.space0()
        values = self.parse_arguments()
        self._terminator()
        return PrintStatement(tuple(values), pos=start)

    def parse_while(self) -> WhileStatement:
        start = self.pos
        self.tag("while")
        self.space1()
        condition = self.parse_expression()
        body = self._block()
        return WhileStatement(condition, body, pos=start)

    def parse_for(self) -> ForStatement:
        start = self.pos
        self.tag("for")
        self.space0()
        init = self.parse_declaration()
        self.space0()
        condition = self.choice(self.parse_logical, self.parse_relational)
        self._terminator()
        self.space0()
        step_start = self.pos
        identifier, value = self._binding()
        step = VariableAssign(identifier, value, pos=step_start)
        body = self._block()
        return ForStatement(init, condition, step, body, pos=start)

    def _block(self) -> CompoundStatement:
        """Parse ``{ compound }``, allowing whitespace and line endings inside the braces."""
        self.space0()
        self.tag("{")
        self.multispace0()
        body = self.parse_compound()
        self.multispace0()
        self.tag("}")
        return body
