"""Abstract syntax tree of paris language.

```
<program>    ::= <statement>*
<statement>  ::= <assignment> | <display>
<assignment> ::= <identifier> ":=" <expression>
<display>    ::= "display" <expression>
<expression> ::= <literal> | <identifier> | "(" <expression> ")"
```

Nodes are immutable once the parser has built them. Every node records the position of its first token. Parentheses
only group: "(x)" parses to the same Identifier as "x".
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple

from paris.lang.error import Position
from paris.lang.values import Value


@dataclass(frozen=True)
class Node:
    """Superclass of every AST node."""

    @property
    def nodes(self):
        """Child nodes, in source order."""
        return ()

    def display(self, indents=0):
        """Recursively displays the tree with readable format.

        Format:
        <Node>(<attrs>, nodes=[
            <Node>(<attrs>, nodes=[
                ...
                <Node>(<attrs>)  # <-- if nodes is empty
            ])
        ])
        """
        result = f"{'    ' * indents}{type(self).__name__}({self.describe()}"
        if self.nodes:
            result += ", nodes=[" if self.describe() else "nodes=["
            for node in self.nodes:
                result += "\n" + node.display(indents + 1) + ","
            result = result[:-1] + f"\n{'    ' * indents}]"
        return result + ")"

    def describe(self):
        """Node attributes (apart from child nodes) shown by display."""
        return ""


@dataclass(frozen=True)
class Expression(Node):
    """Superclass of nodes that evaluate to exactly one value."""


@dataclass(frozen=True)
class Statement(Node):
    """Superclass of top-level nodes."""


@dataclass(frozen=True)
class Identifier(Expression):
    name: str
    position: Optional[Position] = field(default=None, compare=False)

    def describe(self):
        return f"name='{self.name}'"


@dataclass(frozen=True)
class Literal(Expression):
    value: Value
    position: Optional[Position] = field(default=None, compare=False)

    def describe(self):
        return f"value={self.value!r}"


@dataclass(frozen=True)
class AssignmentStatement(Statement):
    name: Identifier
    value: Expression
    position: Optional[Position] = field(default=None, compare=False)

    @property
    def nodes(self):
        return self.name, self.value


@dataclass(frozen=True)
class DisplayStatement(Statement):
    value: Expression
    position: Optional[Position] = field(default=None, compare=False)

    @property
    def nodes(self):
        return (self.value,)


@dataclass(frozen=True)
class Program(Node):
    statements: Tuple[Statement, ...] = ()

    @property
    def nodes(self):
        return self.statements

    def __len__(self):
        return len(self.statements)

    def __iter__(self):
        return iter(self.statements)
