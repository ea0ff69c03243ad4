from ast_nodes import Number, Operator
from evaluator import Evaluator, apply, evaluate, read_number
from parser import parse
from values import Integer, Float, Error, INT_MAX, INT_MIN


def run(text):
    result = parse(text)
    if not result.ok:
        raise AssertionError(f"Expected {text!r} to parse, got: {result.error}")
    return evaluate(result.tree)


def expect(text, expected):
    got = run(text)
    if got != expected:
        raise AssertionError(f"{text}: expected {expected!r}, got {got!r}")


# ---------- literals ----------

def test_integer_literals():
    for text, value in (("42", 42), ("-7", -7), ("007", 7), ("-0", 0)):
        got = read_number(text)
        if got != Integer(value):
            raise AssertionError(f"{text}: expected Integer({value}), got {got!r}")


def test_float_literals():
    for text, value in (("3.5", 3.5), ("-0.25", -0.25), ("2.0", 2.0)):
        got = read_number(text)
        if got != Float(value):
            raise AssertionError(f"{text}: expected Float({value}), got {got!r}")


def test_integer_range_edges():
    if read_number(str(INT_MAX)) != Integer(INT_MAX):
        raise AssertionError("INT_MAX should be representable")
    if read_number(str(INT_MIN)) != Integer(INT_MIN):
        raise AssertionError("INT_MIN should be representable")

    overflow = Error("Invalid number: exceeds representable range")
    for text in (str(INT_MAX + 1), str(INT_MIN - 1), "9" * 5000):
        if read_number(text) != overflow:
            raise AssertionError(f"{text[:30]}...: expected range error")


def test_float_out_of_range():
    got = read_number("1" + "0" * 400 + ".0")
    if got != Error("Invalid number: outside range"):
        raise AssertionError(f"Expected float range error, got {got!r}")


def test_float_underflow_is_out_of_range():
    underflow = Error("Invalid number: outside range")
    for text in ("0." + "0" * 400 + "1", "-0." + "0" * 400 + "5", "0." + "0" * 315 + "1"):
        got = read_number(text)
        if got != underflow:
            raise AssertionError(f"{text[:12]}...: expected {underflow!r}, got {got!r}")

    for text, value in (("0.0", 0.0), ("-0.000", -0.0), ("0." + "0" * 300 + "1", 1e-301)):
        got = read_number(text)
        if got != Float(value):
            raise AssertionError(f"{text[:12]}...: expected Float({value}), got {got!r}")


# ---------- operator application ----------

def test_promotion_law():
    samples = (-12, -1, 0, 1, 7, 1000003)
    for a in samples:
        for b in samples:
            for op, exact in (("+", a + b), ("-", a - b), ("*", a * b)):
                got = apply(op, Integer(a), Integer(b))
                if got != Integer(exact):
                    raise AssertionError(f"({op} {a} {b}): expected Integer({exact}), got {got!r}")
                widened = apply(op, Integer(a), Float(float(b)))
                if not isinstance(widened, Float) or widened.value != float(exact):
                    raise AssertionError(f"({op} {a} {b}.0): expected Float({exact}), got {widened!r}")


def test_division_always_floats():
    if apply("/", Integer(4), Integer(2)) != Float(2.0):
        raise AssertionError("integer division should produce a float")
    if apply("/", Integer(0), Integer(5)) != Float(0.0):
        raise AssertionError("zero dividend should produce 0.0")
    if apply("/", Integer(7), Float(2.0)) != Float(3.5):
        raise AssertionError("mixed division should produce a float")


def test_division_by_zero_boundary():
    zero = Error("Division by zero")
    for divisor in (Integer(0), Float(0.0), Float(-0.0), Float(1e-10), Float(-1e-10), Float(5e-11)):
        got = apply("/", Integer(1), divisor)
        if got != zero:
            raise AssertionError(f"(/ 1 {divisor!r}): expected {zero!r}, got {got!r}")

    got = apply("/", Integer(1), Float(0.001))
    if got != Float(1000.0):
        raise AssertionError(f"(/ 1 0.001): expected Float(1000.0), got {got!r}")


def test_errors_absorb():
    boom = Error("boom")
    for op in ("+", "-", "*", "/"):
        for other in (Integer(1), Float(2.5), Integer(0)):
            if apply(op, boom, other) != boom or apply(op, other, boom) != boom:
                raise AssertionError(f"{op}: error should absorb {other!r}")


def test_left_error_wins():
    left, right = Error("left"), Error("right")
    if apply("+", left, right) != left:
        raise AssertionError("the left error should be propagated")


def test_unknown_operator():
    if apply("%", Integer(1), Integer(2)) != Error("Unknown operator"):
        raise AssertionError("unknown operators should produce an error value")


def test_integer_overflow():
    got = apply("+", Integer(INT_MAX), Integer(1))
    if got != Error("Integer overflow"):
        raise AssertionError(f"Expected overflow error, got {got!r}")
    got = apply("*", Integer(INT_MIN), Integer(-1))
    if got != Error("Integer overflow"):
        raise AssertionError(f"Expected overflow error, got {got!r}")
    if apply("-", Integer(INT_MIN + 1), Integer(1)) != Integer(INT_MIN):
        raise AssertionError("INT_MIN should still be reachable")


# ---------- whole programs ----------

def test_end_to_end_scenarios():
    expect("(+ 1 2)", Integer(3))
    expect("(* 2 3.5)", Float(7.0))
    expect("(/ 4 2)", Float(2.0))
    expect("(- 10 1 2)", Integer(7))


def test_left_associative_fold():
    expect("(- 10 2 3)", Integer(5))
    expect("(/ 64 4 2)", Float(8.0))
    expect("- 10 2 3", Integer(5))


def test_single_operand_is_returned_as_is():
    expect("(- 5)", Integer(5))
    expect("(/ 3)", Integer(3))


def test_float_anywhere_makes_result_float():
    expect("(+ 1 (* 2 1.0) 3)", Float(6.0))
    expect("(+ 1 2 3 4.5)", Float(10.5))
    expect("(* (+ 1 2) (- 4 1))", Integer(9))


def test_error_anywhere_makes_result_error():
    expect("(+ 1 (/ 5 0) 2)", Error("Division by zero"))
    expect("(* (- 99999999999999999999 1) 0)", Error("Invalid number: exceeds representable range"))
    expect("(- (* 2 (/ 1 0.0000000001)) 3.5)", Error("Division by zero"))
    expect("(+ (/ 1 0) 99999999999999999999)", Error("Division by zero"))


def test_deep_nesting_evaluates():
    depth = 5000
    expect("(+ " + "(+ 1 " * depth + "1" + ")" * depth + ")", Integer(depth + 1))
    expect("(+ " + "(* 2 " * depth + "(/ 1 0)" + ")" * depth + ")", Error("Division by zero"))


def test_evaluator_is_reusable():
    evaluator = Evaluator()
    first = evaluator.evaluate(parse("(/ 1 0)").tree)
    second = evaluator.evaluate(parse("(+ 2 2)").tree)
    if first != Error("Division by zero") or second != Integer(4):
        raise AssertionError(f"Unexpected results: {first!r}, {second!r}")


def test_trace_output(capsys):
    Evaluator(trace=True).evaluate(parse("(* 2 (+ 1 0.5))").tree)
    lines = capsys.readouterr().out.splitlines()
    expected = [
        "TRACE apply + 1 0.500000 -> 1.500000",
        "TRACE apply * 2 1.500000 -> 3.000000",
    ]
    if lines != expected:
        raise AssertionError(f"Unexpected trace: {lines}")


def test_operator_node_cannot_be_evaluated():
    try:
        evaluate(Operator("+"))
    except Exception as e:
        if "operator" not in str(e):
            raise AssertionError(f"Unexpected message: {e}")
    else:
        raise AssertionError("evaluating a bare operator should raise")


def test_number_node_evaluates_directly():
    if evaluate(Number("-3.25")) != Float(-3.25):
        raise AssertionError("a number leaf should evaluate to its value")


# ---------- formatting ----------

def test_value_formatting():
    cases = (
        (Integer(-3), "-3"),
        (Integer(3), "3"),
        (Float(7.0), "7.000000"),
        (Float(1000.0), "1000.000000"),
        (Float(-0.5), "-0.500000"),
        (Float(1e20), "100000000000000000000.000000"),
        (Float(float("inf")), "inf"),
        (Error("Division by zero"), "Error: Division by zero"),
    )
    for value, text in cases:
        if str(value) != text:
            raise AssertionError(f"{value!r}: expected {text!r}, got {str(value)!r}")


def test_variants_are_distinct():
    if Integer(2) == Float(2.0):
        raise AssertionError("Integer and Float should never compare equal")
    if Error("x") == Error("y"):
        raise AssertionError("errors with different messages should differ")
