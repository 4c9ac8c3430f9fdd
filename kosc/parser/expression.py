"""
Expression parser.

Operator precedence is encoded by grammar layers, each built only from the
layer that binds tighter:

    atom            ( expr ) | "string" | call | a.b.c | number | name
    multiplicative  atom (( * | / | ^ ) atom)*
    additive        multiplicative (( + | - ) multiplicative)*
    relational      additive relop additive          (exactly one, no chaining)
    logical         operand (( and | && | or | || ) operand)+  |  negation
    negation        ! ( logical | relational | ( expr ) | atom )

    expression      logical | relational | additive | multiplicative
                    | call | a.b.c | ( expr ) | "string"

Arithmetic chains fold to the left into ``BinaryOp`` nodes. Horizontal
whitespace is allowed around binary operators and commas.
"""

from .ast import (
    BinaryOp,
    Expression,
    FieldPath,
    FunctionCall,
    Group,
    Name,
    Not,
    Number,
    StringLiteral,
)
from .lexer import NUMBER_RE, STRING_RE, Scanner, memoized

MULTIPLICATIVE_OPERATORS = ("*", "/", "^")
ADDITIVE_OPERATORS = ("+", "-")
# "<>" must come before "<", and "<=" before "<", or the longer form is unreachable
RELATIONAL_OPERATORS = ("<=", ">=", "<>", "<", ">", "==", "!=")
LOGICAL_OPERATORS = ("and", "&&", "or", "||")


class ExpressionParser(Scanner):
    """Recursive descent parser for the expression grammar."""

    @memoized
    def parse_expression(self) -> Expression:
        return self.choice(
            self.parse_logical,
            self.parse_relational,
            self.parse_additive,
            self.parse_multiplicative,
            self.parse_function_call,
            self.parse_field_path,
            self.parse_brackets,
            self.parse_string,
        )

    # Logical layer

    @memoized
    def parse_logical(self) -> Expression:
        return self.choice(self._logical_chain, self.parse_negation)

    def _logical_chain(self) -> Expression:
        start = self.pos
        result = self._logical_operand()
        for op, operand in self.many1(self._logical_pair):
            result = BinaryOp(result, op, operand, pos=start)
        return result

    def _logical_pair(self) -> tuple[str, Expression]:
        self.space0()
        op = self.one_of(LOGICAL_OPERATORS)
        self.space0()
        return op, self._logical_operand()

    def _logical_operand(self) -> Expression:
        # A bare additive operand lets "a && b" through; comparisons win when present
        return self.choice(self.parse_negation, self.parse_relational, self.parse_additive)

    @memoized
    def parse_negation(self) -> Not:
        start = self.pos
        self.tag("!")
        operand = self.choice(
            self.parse_logical,
            self.parse_relational,
            self.parse_brackets,
            self.parse_atom,
        )
        return Not(operand, pos=start)

    # Relational layer

    @memoized
    def parse_relational(self) -> BinaryOp:
        start = self.pos
        left = self.parse_additive()
        self.space0()
        op = self.one_of(RELATIONAL_OPERATORS)
        self.space0()
        right = self.parse_additive()
        return BinaryOp(left, op, right, pos=start)

    # Arithmetic layers

    @memoized
    def parse_additive(self) -> Expression:
        return self._fold(self.parse_multiplicative, ADDITIVE_OPERATORS)

    @memoized
    def parse_multiplicative(self) -> Expression:
        return self._fold(self.parse_atom, MULTIPLICATIVE_OPERATORS)

    def _fold(self, operand, operators: tuple[str, ...]) -> Expression:
        """Parse ``operand (op operand)*`` and fold it left to right."""
        start = self.pos
        result = operand()

        def pair() -> tuple[str, Expression]:
            self.space0()
            op = self.one_of(operators)
            self.space0()
            return op, operand()

        for op, right in self.many0(pair):
            result = BinaryOp(result, op, right, pos=start)
        return result

    # Atoms

    @memoized
    def parse_atom(self) -> Expression:
        return self.choice(
            self.parse_brackets,
            self.parse_string,
            self.parse_function_call,
            self.parse_field_path,
            self.parse_number,
            self.parse_name,
        )

    @memoized
    def parse_brackets(self) -> Group:
        start = self.pos
        self.tag("(")
        self.space0()
        inner = self.parse_expression()
        self.space0()
        self.tag(")")
        return Group(inner, pos=start)

    @memoized
    def parse_string(self) -> StringLiteral:
        start = self.pos
        literal = self.match(STRING_RE, "string literal")
        return StringLiteral(literal[1:-1], pos=start)

    @memoized
    def parse_function_call(self) -> FunctionCall:
        start = self.pos
        callee = self.choice(self.parse_field_path, self.parse_name)
        args = self.parse_arguments()
        return FunctionCall(callee, tuple(args), pos=start)

    def parse_arguments(self) -> list[Expression]:
        """Parse ``( param-list )``."""
        self.tag("(")
        self.space0()
        args = self.parse_param_list()
        self.space0()
        self.tag(")")
        return args

    def parse_param_list(self) -> list[Expression]:
        """
        Parse comma-separated expressions.

        Returns an empty list, consuming nothing, when no expression is present.
        """
        first = self.optional(self.parse_expression)
        if first is None:
            return []

        def next_param() -> Expression:
            self.space0()
            self.tag(",")
            self.space0()
            return self.parse_expression()

        return [first] + self.many0(next_param)

    @memoized
    def parse_field_path(self) -> FieldPath:
        start = self.pos
        parts = [self.identifier()]

        def member() -> str:
            self.tag(".")
            return self.identifier()

        parts.extend(self.many1(member))
        return FieldPath(tuple(parts), pos=start)

    def parse_number(self) -> Number:
        start = self.pos
        return Number(self.match(NUMBER_RE, "number"), pos=start)

    def parse_name(self) -> Name:
        start = self.pos
        return Name(self.identifier(), pos=start)
