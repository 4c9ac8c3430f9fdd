"""
Code generation.

``CodeGenerator`` renders a parsed tree in the target dialect. The dialect
loops with ``UNTIL <condition>``, which stops once the condition holds, so
while and for guards are wrapped in ``not (...)``.

Examples:
- ``var x;``                      → ``DECLARE x TO 0.``
- ``x = 1+2*3;``                  → ``SET x to 1+2*3.``
- ``assign x = a;``               → ``LOCK x TO a.``
- ``print("x=", x);``             → ``print "x="+x.``
- ``while x<10 { ... }``          → ``UNTIL not (x<10) {\\n...\\n}``
"""

from .ast import (
    BinaryOp,
    CompoundStatement,
    FieldPath,
    ForStatement,
    FunctionCall,
    Group,
    LockStatement,
    Name,
    Not,
    Number,
    PrintStatement,
    StringLiteral,
    VariableAssign,
    VariableDeclaration,
    WhileStatement,
)
from .expression import LOGICAL_OPERATORS

OPERATOR_TRANSLATIONS = {
    "==": "=",
    "!=": "<>",
    "&&": "and",
    "||": "or",
}


class CodeGenerator:
    """
    Render statements and expressions as target-dialect text.

    Rendering is pure: the same tree always yields the same text, and no
    state is kept between calls.
    """

    def generate(self, node) -> str:
        return node.accept(self)

    # Statements

    def visit_declaration(self, node: VariableDeclaration) -> str:
        init = node.init.accept(self) if node.init is not None else "0"
        return f"DECLARE {node.identifier} TO {init}."

    def visit_assign(self, node: VariableAssign) -> str:
        return f"SET {node.identifier} to {node.value.accept(self)}."

    def visit_lock(self, node: LockStatement) -> str:
        return f"LOCK {node.identifier} TO {node.value.accept(self)}."

    def visit_print(self, node: PrintStatement) -> str:
        return "print " + "+".join(value.accept(self) for value in node.values) + "."

    def visit_while(self, node: WhileStatement) -> str:
        condition = node.condition.accept(self)
        body = node.body.accept(self)
        return f"UNTIL not ({condition}) {{\n{body}\n}}"

    def visit_for(self, node: ForStatement) -> str:
        init = node.init.accept(self)
        condition = node.condition.accept(self)
        step = node.step.accept(self)
        body = node.body.accept(self)
        return f"FROM {{{init}}} UNTIL not({condition}) STEP {{{step}}} DO {{\n{body}\n}}"

    def visit_compound(self, node: CompoundStatement) -> str:
        return "\n".join(statement.accept(self) for statement in node.statements)

    # Expressions

    def visit_number(self, node: Number) -> str:
        return node.text

    def visit_name(self, node: Name) -> str:
        return node.name

    def visit_field_path(self, node: FieldPath) -> str:
        return ":".join(node.parts)

    def visit_string(self, node: StringLiteral) -> str:
        return f'"{node.value}"'

    def visit_function_call(self, node: FunctionCall) -> str:
        args = ",".join(arg.accept(self) for arg in node.args)
        return f"{node.callee.accept(self)}({args})"

    def visit_group(self, node: Group) -> str:
        return f"({node.inner.accept(self)})"

    def visit_binary_op(self, node: BinaryOp) -> str:
        left = node.left.accept(self)
        right = node.right.accept(self)
        op = OPERATOR_TRANSLATIONS.get(node.op, node.op)

        # Logical operators are words in the target dialect
        if node.op in LOGICAL_OPERATORS:
            return f"{left} {op} {right}"
        return f"{left}{op}{right}"

    def visit_not(self, node: Not) -> str:
        return f"not {node.operand.accept(self)}"
