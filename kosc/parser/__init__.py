"""
Parser Package

Lexing, expression and statement parsing, syntax tree nodes and code
generation for the translator.
"""

from .ast import (
    ASTNode,
    BinaryOp,
    CompoundStatement,
    Expression,
    FieldPath,
    ForStatement,
    FunctionCall,
    Group,
    LockStatement,
    Name,
    Not,
    Number,
    PrintStatement,
    Statement,
    StringLiteral,
    VariableAssign,
    VariableDeclaration,
    WhileStatement,
)
from .lexer import scan_identifier
from .statement import Parser
from .visitors import CodeGenerator

__all__ = [
    "ASTNode",
    "Expression",
    "Number",
    "Name",
    "FieldPath",
    "StringLiteral",
    "FunctionCall",
    "Group",
    "BinaryOp",
    "Not",
    "Statement",
    "VariableDeclaration",
    "VariableAssign",
    "LockStatement",
    "PrintStatement",
    "WhileStatement",
    "ForStatement",
    "CompoundStatement",
    "scan_identifier",
    "Parser",
    "CodeGenerator",
]
