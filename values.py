"""Result values produced by the evaluator.

Exactly one of Integer, Float or Error. Errors are ordinary values: they
are returned, never raised, and absorb every operation they take part in.
"""

# Integers behave like signed 64-bit machine integers.
INT_MIN = -(2 ** 63)
INT_MAX = 2 ** 63 - 1


class Value:
    def __eq__(self, other):
        return type(self) is type(other) and vars(self) == vars(other)

    def __hash__(self):
        return hash((type(self).__name__, tuple(vars(self).values())))


class Integer(Value):
    def __init__(self, value: int):
        self.value = value

    def __str__(self):
        return str(self.value)

    def __repr__(self):
        return f"Integer({self.value})"


class Float(Value):
    def __init__(self, value: float):
        self.value = value

    def __str__(self):
        # fixed-point like printf("%f"); inf/nan come out as "inf"/"nan"
        return f"{self.value:f}"

    def __repr__(self):
        return f"Float({self.value!r})"


class Error(Value):
    def __init__(self, message: str):
        self.message = message

    def __str__(self):
        return f"Error: {self.message}"

    def __repr__(self):
        return f"Error({self.message!r})"
