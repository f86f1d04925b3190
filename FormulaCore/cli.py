# cli.py
""""" Command line driver for the formula calculator.

   Responsibilities:
   - Read the settings file and configure logging
   - Without arguments: print the demo evaluations
   - With a formula: print its result (optionally copy it to the clipboard)

   This is the only place settings are read; MathEngine gets them as arguments.
"""""
import sys
import argparse
import logging

import pyperclip

from . import config_manager as config_manager, MathEngine as MathEngine

logger = logging.getLogger(__name__)


DEMO_SECTIONS = [
    ("Simple numbers", [("42", None), ("-5", None), ("3.14", None)]),
    ("Basic operations", [
        ("add(2, 3)", None),
        ("subtract(10, 4)", None),
        ("multiply(3, 4)", None),
        ("divide(8, 2)", None),
    ]),
    ("Nested expressions", [
        ("add(2, multiply(3, 4))", None),
        ("multiply(add(2, 3), divide(10, 2))", None),
        ("add(1, add(2, add(3, 4)))", None),
    ]),
    ("Complex nested", [
        ("add(2, multiply(add(1, multiply(1, 1)), divide(2, 2)))", None),
    ]),
    ("Decimal precision", [("divide(10, 3)", 2), ("divide(10, 3)", 4)]),
    ("Error handling", [
        ("divide(10, 0)", None),
        ("unknown(2, 3)", None),
        ("add(2)", None),
        (" That's all folks", None),
    ]),
]


def setup_logging(debug):
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )


def load_engine_settings():
    """Return (decimal_places, max_nesting_depth) from the settings file."""
    decimal_places = config_manager.load_int_setting("decimal_places")
    if decimal_places < 0:
        logger.warning("Ignoring negative decimal_places setting: %d", decimal_places)
        decimal_places = config_manager.DEFAULT_SETTINGS["decimal_places"]
    return decimal_places, config_manager.load_int_setting("max_nesting_depth")


def run_demo(out=sys.stdout, decimal_places=2, max_depth=MathEngine.MAX_NESTING_DEPTH):
    """Print every demo formula with its result."""
    print("=== Formula Evaluator Demo ===", file=out)

    for title, formulas in DEMO_SECTIONS:
        print(f"\n{title}:", file=out)
        for formula, places in formulas:
            label = formula if places is None else f"{formula} [{places} places]"
            result = MathEngine.evaluate(
                formula, decimal_places if places is None else places, max_depth)
            print(f"  {label} = {result}", file=out)


def build_parser():
    parser = argparse.ArgumentParser(
        description="Evaluate formulas like 'multiply(add(2, 3), divide(10, 2))'.")
    parser.add_argument("formula", nargs="?",
                        help="formula to evaluate; runs the demo when omitted")
    parser.add_argument("-p", "--places", type=int, default=None,
                        help="decimal places of the result (default: 'decimal_places' setting)")
    parser.add_argument("-c", "--copy", action="store_true",
                        help="copy the result to the clipboard")
    return parser


def main(argv=None):
    """
    Parse arguments and run one evaluation or the demo.
    - Keep this thin: no business logic here.
    """
    args = build_parser().parse_args(argv)
    setup_logging(config_manager.load_setting_value("debug"))
    decimal_places, max_depth = load_engine_settings()

    if args.formula is None:
        run_demo(decimal_places=decimal_places, max_depth=max_depth)
        return 0

    if args.places is not None:
        if args.places < 0:
            print("Error: --places must not be negative", file=sys.stderr)
            return 2
        decimal_places = args.places

    result = MathEngine.evaluate(args.formula, decimal_places, max_depth)
    print(result)

    if args.copy:
        try:
            pyperclip.copy(result)
        except pyperclip.PyperclipException as e:
            logger.warning("Could not copy result to clipboard: %s", e)

    return 0
