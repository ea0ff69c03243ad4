import sys
import traceback

from colorama import Fore, Style, just_fix_windows_console

from evaluator import Evaluator
from parser import parse
from values import Error


VERSION = "0.0.1"


# Tree printer (so you can SEE what the parser built)
def format_tree(root):
    lines = []
    stack = [(root, 0)]
    while stack:
        node, indent = stack.pop()
        sp = "  " * indent
        if node.text is not None:
            lines.append(f"{sp}{node.tag}:{node.line}:{node.column} '{node.text}'")
            continue
        lines.append(f"{sp}{node.tag}")
        stack.extend((child, indent + 1) for child in reversed(node.children))
    return "\n".join(lines)


def enable_history():
    # Once readline is loaded, input() gets line editing; lines are added
    # to the history by hand so blank lines and :q stay out of it.
    try:
        import readline
    except ImportError:
        # not available on Windows
        return None
    readline.set_auto_history(False)
    return readline


def paint(text, color, enabled):
    if not enabled:
        return text
    return f"{color}{text}{Style.RESET_ALL}"


def report(value, color=False):
    text = str(value)
    if isinstance(value, Error):
        text = paint(text, Fore.RED, color)
    print(text)


def run_line(line, evaluator, color=False):
    # Returns the value, or None when the line did not parse.
    result = parse(line)
    if not result.ok:
        print(paint(str(result.error), Fore.RED, color))
        return None

    value = evaluator.evaluate(result.tree)
    report(value, color)
    return value


def cmd_parse(source, debug: bool = False, color: bool = False):
    try:
        result = parse(source)
        if not result.ok:
            print(paint(str(result.error), Fore.RED, color))
            sys.exit(1)

        tree = result.tree
        print(format_tree(tree))
        print(f"tag: {tree.tag}")
        print(f"contents: {tree.text or ''}")
        print(f"children_num: {len(tree.children)}")
    except Exception as e:
        if debug:
            traceback.print_exc()
        else:
            print(f"Parse error: {e}")
        sys.exit(1)


def cmd_eval(source, debug: bool = False, trace: bool = False, color: bool = False):
    try:
        value = run_line(source, Evaluator(trace=trace), color)
    except Exception as e:
        if debug:
            traceback.print_exc()
        else:
            print(str(e))
        sys.exit(1)

    if value is None or isinstance(value, Error):
        sys.exit(1)


def cmd_repl(debug: bool = False, trace: bool = False, color: bool = False):
    evaluator = Evaluator(trace=trace)
    history = enable_history()

    print(f"MiniLisp version {VERSION}")
    print("Type :q to quit.")

    while True:
        try:
            line = input("miniLisp> ")
        except (EOFError, KeyboardInterrupt):
            print()
            break

        stripped = line.strip()
        if stripped in (":q", ":quit", "quit", "exit"):
            break
        if not stripped:
            continue
        if history is not None:
            history.add_history(stripped)

        try:
            run_line(stripped, evaluator, color)
        except Exception as e:
            if debug:
                traceback.print_exc()
            else:
                print(str(e))


def take_flag(name):
    if name in sys.argv:
        sys.argv.remove(name)
        return True
    return False


def usage():
    print("Usage:")
    print("  minilisp [repl]")
    print('  minilisp eval "(+ 1 (* 2 3.5))"')
    print('  minilisp parse "(+ 1 (* 2 3.5))"')
    print("  (optional) --trace to print every operator application")
    print("  (optional) --no-color to disable colored errors")
    print("  (optional) --debug to show Python traceback")


def main():
    debug = take_flag("--debug")
    trace = take_flag("--trace")
    color = not take_flag("--no-color") and sys.stdout.isatty()
    if color:
        just_fix_windows_console()

    if len(sys.argv) < 2 or sys.argv[1] == "repl":
        if len(sys.argv) > 2:
            usage()
            sys.exit(1)
        cmd_repl(debug=debug, trace=trace, color=color)
        return

    cmd = sys.argv[1]
    if cmd not in ("eval", "parse"):
        print(f"Unknown command: {cmd}")
        usage()
        sys.exit(1)

    if len(sys.argv) < 3:
        usage()
        sys.exit(1)

    # allow the expression unquoted, split over several arguments
    source = " ".join(sys.argv[2:])

    if cmd == "eval":
        cmd_eval(source, debug=debug, trace=trace, color=color)
    else:
        cmd_parse(source, debug=debug, color=color)


if __name__ == "__main__":
    main()
