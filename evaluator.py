import math
import operator
import sys

from ast_nodes import Number, Expr
from values import Integer, Float, Error, INT_MIN, INT_MAX


# Divisors whose magnitude is at or below this count as zero.
EPSILON = 1e-10

OPERATORS = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
}


def read_number(text: str):
    if "." in text:
        value = float(text)
        if math.isinf(value):
            return Error("Invalid number: outside range")
        # underflow: nonzero digits that round to zero or to a subnormal
        if (value == 0.0 and text.strip("-0.")) or 0.0 < abs(value) < sys.float_info.min:
            return Error("Invalid number: outside range")
        return Float(value)

    try:
        value = int(text, 10)
    except ValueError:
        # only reachable for literals longer than sys.get_int_max_str_digits()
        return Error("Invalid number: exceeds representable range")
    if not INT_MIN <= value <= INT_MAX:
        return Error("Invalid number: exceeds representable range")
    return Integer(value)


def apply(op: str, x, y):
    # errors absorb; the left one wins when both sides failed
    if isinstance(x, Error):
        return x
    if isinstance(y, Error):
        return y

    fn = OPERATORS.get(op)
    if fn is None:
        return Error("Unknown operator")

    if op == "/":
        divisor = float(y.value)
        if abs(divisor) <= EPSILON:
            return Error("Division by zero")
        return Float(float(x.value) / divisor)

    if isinstance(x, Float) or isinstance(y, Float):
        return Float(fn(float(x.value), float(y.value)))

    result = fn(x.value, y.value)
    if not INT_MIN <= result <= INT_MAX:
        return Error("Integer overflow")
    return Integer(result)


class Evaluator:
    def __init__(self, trace: bool = False):
        self.trace_enabled = trace

    def evaluate(self, node):
        if isinstance(node, Number):
            return read_number(node.text)

        if not isinstance(node, Expr):
            raise Exception(f"Cannot evaluate {node.tag} node")

        # Depth-first over an explicit stack of open expressions; each frame
        # is (operator, remaining operands, accumulator slot).
        stack = [(node.operator.text, iter(node.operands), [])]
        while True:
            child = next(stack[-1][1], None)

            if child is None:
                _, _, acc = stack.pop()
                if not stack:
                    return acc[0]
                self.fold(stack[-1], acc[0])
            elif isinstance(child, Expr):
                stack.append((child.operator.text, iter(child.operands), []))
            else:
                self.fold(stack[-1], read_number(child.text))

    def fold(self, frame, value):
        op, _, acc = frame
        if not acc:
            acc.append(value)
        else:
            acc[0] = self.apply(op, acc[0], value)

    def apply(self, op, x, y):
        result = apply(op, x, y)
        if self.trace_enabled:
            print(f"TRACE apply {op} {x} {y} -> {result}")
        return result


def evaluate(tree):
    return Evaluator().evaluate(tree)
