from .cli import CLI, CLICommand, CLIInterpreter, InvalidArguments, InvalidOptions, UnknownCommand, EmptyCommandLine
