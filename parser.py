from ast_nodes import Number, Operator, Expr, Program
from lexer import Lexer, ParseError


OPERATOR_TYPES = ("PLUS", "MINUS", "STAR", "SLASH")

# how each token type is named in "expected ..." diagnostics
SYMBOLS = {
    "LPAREN": "'('",
    "RPAREN": "')'",
    "PLUS": "'+'",
    "MINUS": "'-'",
    "STAR": "'*'",
    "SLASH": "'/'",
    "NUMBER": "number",
    "EOF": "end of input",
}

OPERATOR_SYMBOLS = tuple(SYMBOLS[t] for t in OPERATOR_TYPES)


class Parser:
    def __init__(self, lexer):
        self.lexer = lexer
        self.current_token = self.lexer.get_next_token()
        self.next_token = self.lexer.get_next_token()

    # move to next token, but only if it matches what we expect
    def eat(self, token_type):
        if self.current_token.type != token_type:
            self.error_here((SYMBOLS[token_type],))
        self.current_token = self.next_token
        self.next_token = self.lexer.get_next_token()

    def error_here(self, expected):
        tok = self.current_token
        found = "end of input" if tok.type == "EOF" else f"'{tok.value}'"
        raise ParseError(line=tok.line, column=tok.column, expected=expected, found=found)

    # ---------- TOP LEVEL ----------
    # program -> operator expr+ | '(' operator expr+ ')'
    def parse(self):
        tok = self.current_token

        if tok.type == "LPAREN":
            self.eat("LPAREN")
            children = self.operation("RPAREN")
            self.eat("RPAREN")
        elif tok.type in OPERATOR_TYPES:
            children = self.operation("EOF")
        else:
            self.error_here(("'('",) + OPERATOR_SYMBOLS)

        if self.current_token.type != "EOF":
            self.error_here((SYMBOLS["EOF"],))

        return Program(children, line=tok.line, column=tok.column)

    # operation -> operator expr+, stopping in front of `closing`
    #
    # Nested '(' operation ')' groups are kept on an explicit stack instead
    # of the call stack, so nesting depth is bounded only by memory.
    def operation(self, closing):
        # frames: (children so far, closing token type, opening '(' token)
        stack = [([self.operator()], closing, None)]

        while True:
            children, closing, opener = stack[-1]

            if len(children) > 1 and self.current_token.type == closing:
                stack.pop()
                if not stack:
                    return children
                self.eat("RPAREN")
                node = Expr(children, line=opener.line, column=opener.column)
                stack[-1][0].append(node)
                continue

            if len(children) > 1 and not self.at_operand():
                self.error_here(("number", "'('", SYMBOLS[closing]))

            tok = self.current_token
            if tok.type == "LPAREN":
                self.eat("LPAREN")
                stack.append(([self.operator()], "RPAREN", tok))
                continue

            children.append(self.number())

    def operator(self):
        tok = self.current_token
        if tok.type not in OPERATOR_TYPES:
            self.error_here(OPERATOR_SYMBOLS)
        self.eat(tok.type)
        return Operator(tok.value, line=tok.line, column=tok.column)

    # ---------- EXPRESSIONS ----------
    # number -> '-'? NUMBER  (a '(' here is handled by operation)
    def number(self):
        tok = self.current_token

        if tok.type == "NUMBER":
            self.eat("NUMBER")
            return Number(tok.value, line=tok.line, column=tok.column)

        if tok.type == "MINUS" and self.sign_follows():
            self.eat("MINUS")
            digits = self.current_token
            self.eat("NUMBER")
            return Number("-" + digits.value, line=tok.line, column=tok.column)

        self.error_here(("number", "'('"))

    # ---------- HELPERS ----------
    # '-' is a sign only when a digit follows with nothing in between
    def sign_follows(self):
        minus, nxt = self.current_token, self.next_token
        return (
            nxt.type == "NUMBER"
            and nxt.line == minus.line
            and nxt.column == minus.column + 1
        )

    def at_operand(self):
        tok = self.current_token
        if tok.type in ("NUMBER", "LPAREN"):
            return True
        return tok.type == "MINUS" and self.sign_follows()


class ParseResult:
    """Outcome of parse(): either a tree or the error that stopped parsing."""

    def __init__(self, tree=None, error=None):
        self.tree = tree
        self.error = error

    @property
    def ok(self) -> bool:
        return self.error is None

    def __repr__(self):
        if self.ok:
            return f"ParseResult(tree={self.tree!r})"
        return f"ParseResult(error={str(self.error)!r})"


def parse(line: str) -> ParseResult:
    try:
        tree = Parser(Lexer(line)).parse()
    except ParseError as e:
        return ParseResult(error=e)
    return ParseResult(tree=tree)
