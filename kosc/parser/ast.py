"""
Syntax tree node definitions.

Expressions and statements are immutable dataclasses. Each node accepts a
visitor (see ``visitors.CodeGenerator``) so rendering lives outside the
node classes. The node set is closed: a visitor implements one ``visit_*``
method per class below.

``pos`` is the source offset where a node starts. It does not take part in
equality, so trees parsed from differently spaced sources compare equal.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional, Protocol, Union


class ExpressionVisitor(Protocol):
    """Visitor protocol for expression nodes."""

    def visit_number(self, node: "Number") -> Any:
        ...

    def visit_name(self, node: "Name") -> Any:
        ...

    def visit_field_path(self, node: "FieldPath") -> Any:
        ...

    def visit_string(self, node: "StringLiteral") -> Any:
        ...

    def visit_function_call(self, node: "FunctionCall") -> Any:
        ...

    def visit_group(self, node: "Group") -> Any:
        ...

    def visit_binary_op(self, node: "BinaryOp") -> Any:
        ...

    def visit_not(self, node: "Not") -> Any:
        ...


class StatementVisitor(Protocol):
    """Visitor protocol for statement nodes."""

    def visit_declaration(self, node: "VariableDeclaration") -> Any:
        ...

    def visit_assign(self, node: "VariableAssign") -> Any:
        ...

    def visit_lock(self, node: "LockStatement") -> Any:
        ...

    def visit_print(self, node: "PrintStatement") -> Any:
        ...

    def visit_while(self, node: "WhileStatement") -> Any:
        ...

    def visit_for(self, node: "ForStatement") -> Any:
        ...

    def visit_compound(self, node: "CompoundStatement") -> Any:
        ...


class ASTNode(ABC):
    """Base class for all syntax tree nodes."""

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for traversal."""
        pass


# Expressions


class Expression(ASTNode):
    """Base class for expression nodes."""

    @abstractmethod
    def accept(self, visitor: ExpressionVisitor) -> Any:
        pass


@dataclass(frozen=True)
class Number(Expression):
    """
    Numeric literal, kept as written.

    Examples: 5, 3.14, -2, 1e-3
    """

    text: str
    pos: int = field(default=0, compare=False)

    def accept(self, visitor: ExpressionVisitor) -> Any:
        return visitor.visit_number(self)


@dataclass(frozen=True)
class Name(Expression):
    """Plain identifier."""

    name: str
    pos: int = field(default=0, compare=False)

    def accept(self, visitor: ExpressionVisitor) -> Any:
        return visitor.visit_name(self)


@dataclass(frozen=True)
class FieldPath(Expression):
    """
    Dotted field access.

    Examples: ship.velocity, ship.orbit.apoapsis
    """

    parts: tuple[str, ...]
    pos: int = field(default=0, compare=False)

    def accept(self, visitor: ExpressionVisitor) -> Any:
        return visitor.visit_field_path(self)


@dataclass(frozen=True)
class StringLiteral(Expression):
    """Double-quoted string; ``value`` is the text between the quotes."""

    value: str
    pos: int = field(default=0, compare=False)

    def accept(self, visitor: ExpressionVisitor) -> Any:
        return visitor.visit_string(self)


@dataclass(frozen=True)
class FunctionCall(Expression):
    """
    Function call.

    Examples: round(x), max(a, b), ship.partstagged("engine")
    """

    callee: Union[Name, FieldPath]
    args: tuple[Expression, ...] = ()
    pos: int = field(default=0, compare=False)

    def accept(self, visitor: ExpressionVisitor) -> Any:
        return visitor.visit_function_call(self)


@dataclass(frozen=True)
class Group(Expression):
    """Bracketed sub-expression."""

    inner: Expression
    pos: int = field(default=0, compare=False)

    def accept(self, visitor: ExpressionVisitor) -> Any:
        return visitor.visit_group(self)


@dataclass(frozen=True)
class BinaryOp(Expression):
    """
    Binary operation.

    ``op`` is the operator as written in the source (``==``, ``&&``, ...).
    Chains fold to the left: ``a-b-c`` is ``BinaryOp(BinaryOp(a, '-', b), '-', c)``.
    """

    left: Expression
    op: str
    right: Expression
    pos: int = field(default=0, compare=False)

    def accept(self, visitor: ExpressionVisitor) -> Any:
        return visitor.visit_binary_op(self)


@dataclass(frozen=True)
class Not(Expression):
    """Logical negation (``!operand``)."""

    operand: Expression
    pos: int = field(default=0, compare=False)

    def accept(self, visitor: ExpressionVisitor) -> Any:
        return visitor.visit_not(self)


# Statements


class Statement(ASTNode):
    """Base class for statement nodes."""

    @abstractmethod
    def accept(self, visitor: StatementVisitor) -> Any:
        pass


@dataclass(frozen=True)
class VariableDeclaration(Statement):
    """``var name [= init];``"""

    identifier: str
    init: Optional[Expression] = None
    pos: int = field(default=0, compare=False)

    def accept(self, visitor: StatementVisitor) -> Any:
        return visitor.visit_declaration(self)


@dataclass(frozen=True)
class VariableAssign(Statement):
    """``name = value;``"""

    identifier: str
    value: Expression
    pos: int = field(default=0, compare=False)

    def accept(self, visitor: StatementVisitor) -> Any:
        return visitor.visit_assign(self)


@dataclass(frozen=True)
class LockStatement(Statement):
    """``assign name = value;``"""

    identifier: str
    value: Expression
    pos: int = field(default=0, compare=False)

    def accept(self, visitor: StatementVisitor) -> Any:
        return visitor.visit_lock(self)


@dataclass(frozen=True)
class PrintStatement(Statement):
    """``print(a, b, ...);``"""

    values: tuple[Expression, ...] = ()
    pos: int = field(default=0, compare=False)

    def accept(self, visitor: StatementVisitor) -> Any:
        return visitor.visit_print(self)


@dataclass(frozen=True)
class CompoundStatement(Statement):
    """Ordered statement sequence; a program or a loop body."""

    statements: tuple[Statement, ...] = ()
    pos: int = field(default=0, compare=False)

    def accept(self, visitor: StatementVisitor) -> Any:
        return visitor.visit_compound(self)


@dataclass(frozen=True)
class WhileStatement(Statement):
    """``while condition { body }``"""

    condition: Expression
    body: CompoundStatement
    pos: int = field(default=0, compare=False)

    def accept(self, visitor: StatementVisitor) -> Any:
        return visitor.visit_while(self)


@dataclass(frozen=True)
class ForStatement(Statement):
    """``for var i = 0; condition; i = step { body }``"""

    init: VariableDeclaration
    condition: Expression
    step: VariableAssign
    body: CompoundStatement
    pos: int = field(default=0, compare=False)

    def accept(self, visitor: StatementVisitor) -> Any:
        return visitor.visit_for(self)
