from . import logs
from .logs import Logger, Logged, LogChannel, init, shutdown
from .log_file import LogStream, LogFile, LogWriter, log_writer, close_writers, make_timestamp
