"""
Abstract Syntax Tree node definitions for Brev.

Every node renders back to source-like text with str(), reports the literal
of the token that introduced it through token_literal(), and supports the
visitor pattern. Statement and expression nodes are frozen once built; the
Program is the one mutable node, since the parser appends to it statement by
statement. Equality is structural and ignores source positions.

Rendering and ASTPrinter walk the tree with an explicit stack, so very deep
trees (long runs of prefix operators, say) do not hit the recursion limit.
"""

from abc import ABC, abstractmethod
from typing import Any, ClassVar, List, Tuple, Union
from dataclasses import dataclass, field
from enum import Enum

from ..lexer.tokens import Token


class ASTNodeType(Enum):
    """Enumeration of all AST node types."""

    PROGRAM = "Program"

    # Statements
    ASSIGNMENT_STATEMENT = "AssignmentStatement"
    EXPRESSION_STATEMENT = "ExpressionStatement"

    # Expressions
    IDENTIFIER = "Identifier"
    INT_LITERAL = "IntLiteral"
    PREFIX_EXPRESSION = "PrefixExpression"
    INFIX_EXPRESSION = "InfixExpression"


class ASTVisitor:
    """
    Base visitor for traversing AST nodes.

    visit() dispatches to visit_<node type>, e.g. visit_infix_expression,
    falling back to generic_visit for node types without a handler.
    """

    def visit(self, node: 'ASTNode') -> Any:
        method = getattr(self, f"visit_{node.node_type.name.lower()}", self.generic_visit)
        return method(node)

    def generic_visit(self, node: 'ASTNode') -> Any:
        for child in node.children():
            child.accept(self)
        return None


class ASTNode(ABC):
    """Base class for all AST nodes."""

    node_type: ClassVar[ASTNodeType]

    @abstractmethod
    def token_literal(self) -> str:
        """Literal of the token that introduced this node."""
        pass

    @abstractmethod
    def children(self) -> List['ASTNode']:
        """Get all child nodes."""
        pass

    @abstractmethod
    def source_parts(self) -> List[Union[str, 'ASTNode']]:
        """Text fragments and child nodes that make up this node's rendering."""
        pass

    def __str__(self) -> str:
        return render(self)

    def accept(self, visitor: ASTVisitor) -> Any:
        """Accept a visitor (visitor pattern)."""
        return visitor.visit(self)


def render(node: ASTNode) -> str:
    """Render a node back to source-like text."""
    pieces: List[str] = []
    pending: List[Union[str, ASTNode]] = [node]
    while pending:
        item = pending.pop()
        if isinstance(item, str):
            pieces.append(item)
        else:
            pending.extend(reversed(item.source_parts()))
    return "".join(pieces)


class Statement(ASTNode):
    """Base class for statements."""
    pass


class Expression(ASTNode):
    """Base class for expressions."""
    pass


# ============================================================================
# Top-level node
# ============================================================================

@dataclass
class Program(ASTNode):
    """
    Root AST node: the statements of one parse, in source order.

    Unlike the other nodes it is not frozen; the parser appends statements
    as it goes.
    """
    statements: List[Statement] = field(default_factory=list)

    node_type: ClassVar[ASTNodeType] = ASTNodeType.PROGRAM

    def token_literal(self) -> str:
        if self.statements:
            return self.statements[0].token_literal()
        return ""

    def children(self) -> List[ASTNode]:
        return list(self.statements)

    def source_parts(self) -> List[Union[str, ASTNode]]:
        parts: List[Union[str, ASTNode]] = []
        for i, statement in enumerate(self.statements):
            if i:
                parts.append("\n")
            parts.append(statement)
        return parts


# ============================================================================
# Expressions
# ============================================================================

@dataclass(frozen=True)
class Identifier(Expression):
    """Identifier expression."""
    token: Token = field(compare=False, repr=False)
    name: str

    node_type: ClassVar[ASTNodeType] = ASTNodeType.IDENTIFIER

    def token_literal(self) -> str:
        return self.token.literal

    def children(self) -> List[ASTNode]:
        return []

    def source_parts(self) -> List[Union[str, ASTNode]]:
        return [self.name]


@dataclass(frozen=True)
class IntLiteral(Expression):
    """Signed 64-bit integer literal."""
    token: Token = field(compare=False, repr=False)
    value: int

    node_type: ClassVar[ASTNodeType] = ASTNodeType.INT_LITERAL

    def token_literal(self) -> str:
        return self.token.literal

    def children(self) -> List[ASTNode]:
        return []

    def source_parts(self) -> List[Union[str, ASTNode]]:
        return [str(self.value)]


@dataclass(frozen=True)
class PrefixExpression(Expression):
    """Unary operation, e.g. -x or !x."""
    token: Token = field(compare=False, repr=False)
    operator: str
    operand: Expression

    node_type: ClassVar[ASTNodeType] = ASTNodeType.PREFIX_EXPRESSION

    def token_literal(self) -> str:
        return self.token.literal

    def children(self) -> List[ASTNode]:
        return [self.operand]

    def source_parts(self) -> List[Union[str, ASTNode]]:
        return [self.operator, self.operand]


@dataclass(frozen=True)
class InfixExpression(Expression):
    """Binary operation. The token is the operator token."""
    token: Token = field(compare=False, repr=False)
    operator: str
    left: Expression
    right: Expression

    node_type: ClassVar[ASTNodeType] = ASTNodeType.INFIX_EXPRESSION

    def token_literal(self) -> str:
        return self.token.literal

    def children(self) -> List[ASTNode]:
        return [self.left, self.right]

    def source_parts(self) -> List[Union[str, ASTNode]]:
        return [self.left, self.operator, self.right]


# ============================================================================
# Statements
# ============================================================================

@dataclass(frozen=True)
class AssignmentStatement(Statement):
    """name = value. The token is the '=' token."""
    token: Token = field(compare=False, repr=False)
    name: Identifier
    value: Expression

    node_type: ClassVar[ASTNodeType] = ASTNodeType.ASSIGNMENT_STATEMENT

    def token_literal(self) -> str:
        return self.token.literal

    def children(self) -> List[ASTNode]:
        return [self.name, self.value]

    def source_parts(self) -> List[Union[str, ASTNode]]:
        return [self.name, " = ", self.value]


@dataclass(frozen=True)
class ExpressionStatement(Statement):
    """A bare expression used as a statement."""
    token: Token = field(compare=False, repr=False)
    expression: Expression

    node_type: ClassVar[ASTNodeType] = ASTNodeType.EXPRESSION_STATEMENT

    def token_literal(self) -> str:
        return self.token.literal

    def children(self) -> List[ASTNode]:
        return [self.expression]

    def source_parts(self) -> List[Union[str, ASTNode]]:
        return [self.expression]


class ASTPrinter(ASTVisitor):
    """Renders a node as an indented tree, one node per line."""

    def __init__(self, indent: str = "  "):
        self.indent = indent
        self._depth = 0
        self._lines: List[str] = []
        self._pending: List[Tuple[ASTNode, int]] = []

    def format(self, node: ASTNode) -> str:
        self._lines = []
        self._pending = [(node, 0)]
        # Visit methods queue their children instead of recursing into them
        while self._pending:
            current, self._depth = self._pending.pop()
            current.accept(self)
        return "\n".join(self._lines)

    def _emit(self, text: str):
        self._lines.append(f"{self.indent * self._depth}{text}")

    def _visit_children(self, node: ASTNode):
        self._queue(node.children())

    def _queue(self, children: List[ASTNode]):
        for child in reversed(children):
            self._pending.append((child, self._depth + 1))

    def visit_program(self, node: Program):
        self._emit("Program")
        self._visit_children(node)

    def visit_assignment_statement(self, node: AssignmentStatement):
        self._emit(f"AssignmentStatement {node.name.name}")
        self._queue([node.value])

    def visit_identifier(self, node: Identifier):
        self._emit(f"Identifier {node.name}")

    def visit_int_literal(self, node: IntLiteral):
        self._emit(f"IntLiteral {node.value}")

    def visit_prefix_expression(self, node: PrefixExpression):
        self._emit(f"PrefixExpression {node.operator}")
        self._visit_children(node)

    def visit_infix_expression(self, node: InfixExpression):
        self._emit(f"InfixExpression {node.operator}")
        self._visit_children(node)

    def generic_visit(self, node: ASTNode):
        self._emit(node.node_type.value)
        self._visit_children(node)
