import sys
from textwrap import indent

from proplogic import Version
from proplogic import logs
from proplogic.formula import parse, ParserError
from proplogic.satisfiability import DynamicSatisfiability, Expectative
from .cli import CLI, CLICommand, InvalidArguments
from .config import Config, ConfigError

class InvalidFormula(Exception):

    def __init__(self, text, error):
        self.Text = text
        self.Error = error

    def __str__(self):
        lines = [str(self.Error), "    " + self.Text]
        if self.Error.Position is not None:
            lines.append("    " + " " * self.Error.Position + "^")
        return "\n".join(lines)

def parse_formula(args):
    text = " ".join(args)
    try:
        return parse(text)
    except ParserError as e:
        raise InvalidFormula(text, e)

def run_passes(expression, passes):
    for name in passes:
        expression = getattr(expression, name)()
    return expression

class ShowCommand(CLICommand):

    MinArgs = 1
    Opts = "tf"
    Usage = """[-t|-f] "<formula>"       -- print parsed formula, rewritten formula and requirements
        -t      - derive requirements for the formula to be true
        -f      - derive requirements for the formula to be false
    """

    def __call__(self, command, config, opts, args):
        expression = parse_formula(args)
        passes = config["passes"]
        expectative = config["expectative"]
        if "-f" in opts:    expectative = False
        if "-t" in opts:    expectative = True

        print("Parsed:")
        print(expression.pretty("    "))
        print()
        rewritten = run_passes(expression, passes)
        print("After %s:" % (", ".join(passes) or "no passes",))
        print(rewritten.pretty("    "))
        print()
        requirement = DynamicSatisfiability(rewritten).satisfies(expectative)
        if config["normalize"]:
            requirement = requirement.normalize()
        print("Requirements for the formula to be %s:" % ("true" if expectative else "false",))
        print(indent(requirement.format(), "    "))

class PassCommand(CLICommand):

    MinArgs = 1

    def __init__(self, pass_name, description):
        self.PassName = pass_name
        self.Usage = f'"<formula>"       -- {description}'

    def __call__(self, command, config, opts, args):
        expression = parse_formula(args)
        print(getattr(expression, self.PassName)())

class SatisfyCommand(CLICommand):

    MinArgs = 1
    Opts = "tfn"
    Usage = """[-t|-f] [-n] "<formula>"       -- print variable assignments making the formula true or false
        -t      - formula must be true (default)
        -f      - formula must be false
        -n      - normalize: expand into alternatives and drop inconsistent ones
    """

    def __call__(self, command, config, opts, args):
        expression = parse_formula(args)
        expectative = config["expectative"]
        if "-f" in opts:    expectative = False
        if "-t" in opts:    expectative = True
        requirement = DynamicSatisfiability(expression).satisfies(expectative)
        if "-n" in opts or config["normalize"]:
            requirement = requirement.normalize()
        print(requirement.format())

class CheckCommand(CLICommand):

    MinArgs = 1
    Opts = "tfa"
    Usage = """[-t|-f|-a] "<formula>"       -- quick check, treats repeated variables as independent
        -t      - can the formula be true (default)
        -f      - can the formula be false
        -a      - can the formula be either
        Exit status is 1 if the formula can not be satisfied
    """

    def __call__(self, command, config, opts, args):
        expression = parse_formula(args)
        expectative = Expectative.TRUE
        if "-f" in opts:    expectative = Expectative.FALSE
        if "-a" in opts:    expectative = Expectative.ANY
        if expression.general_satisfiability().satisfies(expectative):
            print("possibly satisfiable")
        else:
            print("unsatisfiable")
            return 1

class VersionCommand(CLICommand):

    Usage = "-- print version"

    def __call__(self, command, config, opts, args):
        print("proplogic version", Version)

class ProplogicCLI(CLI):

    Opts = "c:d"
    Usage = """[-c <config file>] [-d] <command> ...
        -c <config file>    - YAML configuration, default: $PROPLOGIC_CONFIG
        -d                  - debug output to stderr

    Formula syntax: variables are alphanumeric words, operators by increasing precedence:
        |   or
        &   and
        ^   exclusive or
        ¬   not
    """

    def update_context(self, context, opts, args):
        if context is None:
            context = Config.load(opts.get("-c"))
            output, debug = context.log_config()
            debug = debug or "-d" in opts
            logs.init(output, debug_enabled=debug)
        return context

def main():
    cli = ProplogicCLI(
        "show",         ShowCommand(),
        "optimize",     PassCommand("optimize", "apply Boolean algebra laws"),
        "simplify",     PassCommand("simplify", "rewrite using negation and disjunction only"),
        "demorgan",     PassCommand("de_morgan", "push negations into conjunctions and disjunctions"),
        "apply",        PassCommand("apply", "optimize, simplify, optimize again"),
        "satisfy",      SatisfyCommand(),
        "check",        CheckCommand(),
        "version",      VersionCommand()
    )
    try:
        status = cli.run(sys.argv, argv0="proplogic")
    except (InvalidFormula, ConfigError, InvalidArguments) as e:
        print(e, file=sys.stderr)
        status = 1
    except OSError as e:
        print(e, file=sys.stderr)
        status = 1
    sys.exit(status or 0)

if __name__ == "__main__":
    main()
