"""
Management command that evaluates expressions read line by line.

- Each non-blank line is evaluated against the current variables
- A blank line prints the variables, e.g. ``(x=2,y=5)``, and resets them
- Invalid expressions and undefined variables are reported and skipped
"""
import logging
import sys

from django.core.management.base import BaseCommand

from calculator.conf import calculator_settings
from calculator.engine import ExpressionCalculator
from calculator.exceptions import InvalidExpression, UndefinedVariable

logger = logging.getLogger(__name__)

BANNER = (
    "Welcome to the Numeric Expression Calculator!\n"
    "--------------------------------------------------\n"
    "Supported operations: +, -, *, =, +=, ++ (prefix and postfix)\n"
    "Separate operands and operators with a single whitespace.\n"
    "Enter an empty line to print the variables and start over.\n"
    "--------------------------------------------------"
)


class Command(BaseCommand):
    help = "Evaluate expressions one per line; a blank line prints and resets the variables"
    stealth_options = ("stdin",)

    def add_arguments(self, parser):
        parser.add_argument(
            "path",
            nargs="?",
            help="File to read expressions from (defaults to standard input)",
        )
        parser.add_argument(
            "--no-banner",
            action="store_false",
            dest="banner",
            default=None,
            help="Do not print the welcome banner",
        )

    def handle(self, *args, **options):
        show_banner = options["banner"]
        if show_banner is None:
            show_banner = calculator_settings.SHOW_BANNER
        if show_banner:
            self.stdout.write(BANNER)

        calculator = ExpressionCalculator()
        path = options.get("path")
        if path:
            with open(path, encoding="utf-8") as stream:
                self.run(calculator, stream, options["verbosity"])
        else:
            self.run(calculator, options.get("stdin") or sys.stdin, options["verbosity"])

    def run(self, calculator, stream, verbosity):
        for line in stream:
            expression = line.rstrip("\r\n")

            if not expression.strip():
                self.flush(calculator)
                continue

            try:
                result = calculator.calculate(expression)
            except InvalidExpression:
                logger.info("Rejected expression %r", expression)
                self.stderr.write(self.style.ERROR(f"The expression '{expression}' is invalid."))
                continue
            except UndefinedVariable as e:
                logger.info("Undefined variable %r in %r", e.name, expression)
                self.stderr.write(
                    self.style.ERROR(f"There is an undefined variable in the expression '{expression}'.")
                )
                continue

            if verbosity >= 2:
                self.stdout.write(f"{expression} => {result}")

        if calculator.get_variables():
            self.flush(calculator)

    def flush(self, calculator):
        self.stdout.write(calculator.get_variables_as_string())
        calculator.reset()
