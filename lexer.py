DIGITS = "0123456789"
WHITESPACE = " \t\r\n\f\v"


class Token:
    def __init__(self, type, value=None, line=1, column=1):
        self.type = type
        self.value = value
        self.line = line
        self.column = column

    def __repr__(self):
        if self.value is not None:
            return f"{self.type}({self.value})"
        return f"{self.type}"


class ParseError(Exception):
    def __init__(self, line: int = 1, column: int = 1, expected=(), found: str = "end of input"):
        super().__init__("parse error")
        self.line = line
        self.column = column
        self.expected = tuple(expected)  # grammar symbols, in order
        self.found = found

    def format(self, source: str = "<stdin>") -> str:
        where = f"{source}:{self.line}:{self.column}: error:"
        return f"{where} expected {describe_expected(self.expected)} at {self.found}"

    def __str__(self) -> str:
        return self.format()


def describe_expected(symbols):
    symbols = list(symbols)
    if not symbols:
        return "nothing"
    if len(symbols) == 1:
        return symbols[0]
    return ", ".join(symbols[:-1]) + " or " + symbols[-1]


class Lexer:
    def __init__(self, text):
        self.text = text
        self.pos = 0
        self.current_char = text[0] if text else None
        self.line = 1
        self.column = 1

    def advance(self):
        # track line/column based on current_char before moving
        if self.current_char == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        self.pos += 1
        if self.pos >= len(self.text):
            self.current_char = None
        else:
            self.current_char = self.text[self.pos]

    def peek(self):
        nxt = self.pos + 1
        if nxt >= len(self.text):
            return None
        return self.text[nxt]

    # whitespace is insignificant everywhere, newlines included
    def skip_whitespace(self):
        while self.current_char and self.current_char in WHITESPACE:
            self.advance()

    def read_number(self):
        # digit+ ('.' digit+)?  -- the sign is attached by the parser
        start_line, start_col = self.line, self.column
        result = ""
        while self.current_char and self.current_char in DIGITS:
            result += self.current_char
            self.advance()

        # a dot only belongs to the number when a digit follows it
        if self.current_char == "." and self.peek() is not None and self.peek() in DIGITS:
            result += self.current_char
            self.advance()
            while self.current_char and self.current_char in DIGITS:
                result += self.current_char
                self.advance()

        return Token("NUMBER", result, line=start_line, column=start_col)

    def get_next_token(self):
        while self.current_char:

            if self.current_char in WHITESPACE:
                self.skip_whitespace()
                continue

            # ASCII only; str.isdigit() also accepts superscripts
            if self.current_char in DIGITS:
                return self.read_number()

            start_line, start_col = self.line, self.column
            ch = self.current_char
            single = {
                "(": "LPAREN",
                ")": "RPAREN",
                "+": "PLUS",
                "-": "MINUS",
                "*": "STAR",
                "/": "SLASH",
            }
            self.advance()
            if ch in single:
                return Token(single[ch], ch, line=start_line, column=start_col)

            # Left for the parser, which knows what it expected here.
            return Token("INVALID", ch, line=start_line, column=start_col)

        return Token("EOF", line=self.line, column=self.column)
