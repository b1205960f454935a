import getopt, textwrap, sys

class UnknownCommand(Exception):
    def __init__(self, command, argv):
        self.Command = command
        self.Argv = argv

    def __str__(self):
        return f"Unknown command: {self.Command}\n" + \
            f"    command line: {self.Argv}"

class EmptyCommandLine(Exception):
    pass

class InvalidArguments(Exception):
    pass

class InvalidOptions(Exception):
    pass

def format_paragraph(indent, text):
    if "\n" in text:
        first_line, rest = text.split("\n", 1)
        return [first_line.strip()] + [indent + l for l in textwrap.dedent(rest.rstrip()).split("\n")]
    else:
        return [text.strip()]

class CLIInterpreter(object):

    #
    # Opts: getopt short options string, optionally followed by long options:
    #   "fn"  or  ("fn", ["false", "normalize"])
    # Commands return the process exit status, None meaning success
    #

    Opts = ("", [])
    Usage = ""
    Defaults = {}
    MinArgs = 0
    Hidden = False

    def get_options(self):
        opts = self.Opts
        if isinstance(opts, str):
            return opts, []
        elif isinstance(opts, list):
            return "", opts
        assert isinstance(opts, tuple) and len(opts) == 2
        return opts

    def make_opts_dict(self, opts):
        opts_dict = {}
        for opt, val in opts:
            existing = opts_dict.get(opt)
            if existing is None:
                opts_dict[opt] = val
            elif isinstance(existing, list):
                existing.append(val)
            else:
                opts_dict[opt] = [existing, val]
        out = self.Defaults.copy()
        out.update(opts_dict)
        return out

    def getopt(self, argv):
        short_opts, long_opts = self.get_options()
        try:
            opts, args = getopt.getopt(argv, short_opts, long_opts)
        except getopt.GetoptError as e:
            raise InvalidOptions(str(e))
        if len(args) < self.MinArgs:
            raise InvalidArguments()
        return self.make_opts_dict(opts), args

    # overridable
    def _run(self, command, context, argv, usage_on_error=True):
        return None

class CLICommand(CLIInterpreter):

    def _run(self, command, context, argv, usage_on_error=True):

        if argv and argv[0] in ("help", "--help", "-?"):
            print(self.help(command), file=sys.stderr)
            return

        try:
            opts, args = self.getopt(argv)
        except (InvalidOptions, InvalidArguments):
            if usage_on_error:
                print(f"Invalid arguments or options for {command}\n", file=sys.stderr)
                print(self.help(command), file=sys.stderr)
                return 2
            else:
                raise
        return self(command, context, opts, args)

    def __call__(self, command, context, opts, args):
        raise NotImplementedError()

    def help(self, command="", indent=""):
        if command: command = command + " "
        return indent + command + "\n".join(format_paragraph(indent + "  ", self.Usage))

    def usage(self):
        return self.Usage.split("\n", 1)[0].strip()

class CLI(CLIInterpreter):

    def __init__(self, *args, hidden=False, usage="", opts=""):
        self.Hidden = hidden
        self.UsageParagraph = usage or self.Usage
        self.Opts = opts or self.Opts
        self.Words = []
        self.Interpreters = {}

        i = 0
        while i < len(args):
            w, c = args[i], args[i+1]
            self.Words.append(w)
            self.Interpreters[w] = c
            i += 2

    def commands(self):
        return self.Words

    # overridable
    def update_context(self, context, opts, args):
        return context

    def _run(self, pre_command, context, argv, usage_on_error=True):

        if argv and argv[0] in ("help", "--help", "-?"):
            print(self.help(pre_command), file=sys.stderr)
            return

        try:
            opts, args = self.getopt(argv)
        except (InvalidOptions, InvalidArguments):
            if usage_on_error:
                print(f"Invalid arguments or options for {pre_command}\n", file=sys.stderr)
                print(self.usage(pre_command), file=sys.stderr)
                return 2
            else:
                raise

        if not args:
            if usage_on_error:
                print(self.usage(pre_command), file=sys.stderr)
                return 2
            else:
                raise EmptyCommandLine()

        word, rest = args[0], args[1:]

        if word in ("help", "--help"):
            print(self.help(pre_command), file=sys.stderr)
            return

        interp = self.Interpreters.get(word)
        if interp is None:
            if usage_on_error:
                print(f"Unknown command {word}\n", file=sys.stderr)
                print(self.usage(pre_command), file=sys.stderr)
                return 2
            else:
                raise UnknownCommand(word, args)

        context = self.update_context(context, opts, args)
        return interp._run(pre_command + " " + word, context, rest, usage_on_error=usage_on_error)

    def run(self, argv, context=None, usage_on_error=True, argv0=None):
        argv0 = argv0 or argv[0]
        return self._run(argv0, context, argv[1:], usage_on_error)

    def usage_headline(self):
        return self.UsageParagraph.split("\n", 1)[0].strip()

    def usage(self, pre_command="", indent=""):
        out = ["Usage:", indent + (pre_command + " " + self.usage_headline()).strip()]
        indent = "  " + indent

        words = [w for w in self.Words if not self.Interpreters[w].Hidden]
        maxcmd = max([len(w) for w in words] + [4])     # 4 for "help"
        fmt = f"%-{maxcmd}s %s"

        for w in words:
            interp = self.Interpreters[w]
            if isinstance(interp, CLI):
                down_usage = ",".join(interp.Words)
            else:
                down_usage = interp.usage()
            out.append(indent + (fmt % (w, down_usage)))
        out.append(indent + (fmt % ("help", "-- print help")))
        return "\n".join(out)

    def help(self, pre_command="", indent=""):
        out = [indent + (pre_command + " " + "\n".join(format_paragraph(indent + "  ", self.UsageParagraph))).strip()]
        out.append("")
        out.append(indent + "Commands:")
        indent += "  "
        for word in self.Words:
            interp = self.Interpreters[word]
            if interp.Hidden:
                continue
            out.append(interp.help(word, indent) if isinstance(interp, CLICommand) else indent + word)
        return "\n".join(out)
