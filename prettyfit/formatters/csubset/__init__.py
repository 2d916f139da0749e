"""C subset formatter."""

from prettyfit.formatters.csubset.lib import (
    AssignStmt,
    CallExpr,
    CFormatter,
    CharType,
    DeclStmt,
    EnumDecl,
    EnumType,
    ExprStmt,
    FunctionDecl,
    Identifier,
    IntLiteral,
    IntType,
    Member,
    PointerType,
    Program,
    ReturnStmt,
    StringLiteral,
    StructDecl,
    StructType,
    VarDecl,
)

__all__ = [
    "AssignStmt",
    "CallExpr",
    "CFormatter",
    "CharType",
    "DeclStmt",
    "EnumDecl",
    "EnumType",
    "ExprStmt",
    "FunctionDecl",
    "Identifier",
    "IntLiteral",
    "IntType",
    "Member",
    "PointerType",
    "Program",
    "ReturnStmt",
    "StringLiteral",
    "StructDecl",
    "StructType",
    "VarDecl",
]
