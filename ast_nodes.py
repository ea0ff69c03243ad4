class ASTNode:
    tag = "node"
    text = None
    children = ()

    # Source position (1-based). Parser sets these.
    line: int = 1
    column: int = 1

    def __eq__(self, other):
        return (
            type(self) is type(other)
            and self.text == other.text
            and self.children == other.children
        )

    def __hash__(self):
        return hash((self.tag, self.text, self.children))


class Number(ASTNode):
    tag = "number"

    def __init__(self, text, line=1, column=1):
        self.text = text  # exact source text, sign included
        self.line = line
        self.column = column

    def __repr__(self):
        return f"Number({self.text})"


class Operator(ASTNode):
    tag = "operator"

    def __init__(self, text, line=1, column=1):
        self.text = text  # one of + - * /
        self.line = line
        self.column = column

    def __repr__(self):
        return f"Operator({self.text})"


class Expr(ASTNode):
    tag = "expr"

    def __init__(self, children, line=1, column=1):
        # (Operator, operand, operand, ...); operands are Number or Expr
        self.children = tuple(children)
        self.line = line
        self.column = column

    @property
    def operator(self):
        return self.children[0]

    @property
    def operands(self):
        return self.children[1:]

    def __repr__(self):
        return f"Expr({', '.join(repr(c) for c in self.children)})"


class Program(Expr):
    tag = "program"

    def __repr__(self):
        return f"Program({', '.join(repr(c) for c in self.children)})"
