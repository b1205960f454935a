import sys
import datetime
from pythreader import synchronized, Primitive

def make_timestamp(t=None):
    if t is None:
        t = datetime.datetime.now()
    elif isinstance(t, (int, float)):
        t = datetime.datetime.fromtimestamp(t)
    return t.strftime("%m/%d/%Y %H:%M:%S") + ".%03d" % (t.microsecond//1000)

class LogWriter(Primitive):

    def __init__(self, name=None):
        Primitive.__init__(self, name=name)

    def format(self, msg, raw=False, t=None):
        if t is not False and not raw:
            msg = "%s: %s" % (make_timestamp(t), msg)
        return msg

class LogStream(LogWriter):

    def __init__(self, stream, **ignore):
        LogWriter.__init__(self, name=f"LogStream({stream})")
        self.Stream = stream            # sys.stdout, sys.stderr

    @synchronized
    def log(self, msg, raw=False, t=None):
        self.write(self.format(msg, raw, t) + '\n')

    @synchronized
    def write(self, msg):
        self.Stream.write(msg)
        self.Stream.flush()

class LogFile(LogWriter):

    def __init__(self, path, append=True, **ignore):
        LogWriter.__init__(self, name=f"LogFile({path})")
        assert isinstance(path, str), "LogFile.__init__: path must be a string. Got %s %s instead" % (type(path), path)
        self.Path = path
        self.File = open(path, 'a' if append else 'w')

    @synchronized
    def log(self, msg, raw=False, t=None):
        self.write(self.format(msg, raw, t) + '\n')

    @synchronized
    def write(self, msg):
        if msg:
            self.File.write(msg)
        self.File.flush()

    @synchronized
    def close(self):
        if self.File is not None:
            self.File.close()
            self.File = None

    def __del__(self):
        if getattr(self, "File", None) is not None:
            self.File.close()
            self.File = None

_LogWriters = {}

def close_writers():
    for writer in _LogWriters.values():
        if isinstance(writer, LogFile):
            writer.close()
    _LogWriters.clear()

def log_writer(output, **args):
    #
    # output: LogWriter, sys.stdout, sys.stderr, "-" (stdout), "2>" (stderr) or a file path
    # Writers are shared by output name
    #
    if isinstance(output, LogWriter) or output is None:
        return output
    if output is sys.stdout:
        output = "-"
    elif output is sys.stderr:
        output = "2>"
    assert isinstance(output, str)
    if output == "1>":
        output = "-"
    if output not in _LogWriters:
        if output == "-":
            _LogWriters[output] = LogStream(sys.stdout)
        elif output == "2>":
            _LogWriters[output] = LogStream(sys.stderr)
        else:
            _LogWriters[output] = LogFile(output, **args)
    return _LogWriters[output]
