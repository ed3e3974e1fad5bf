from .entry import Entry as Entry
from .log_level import LogLevel as LogLevel
from .logger import Logger as Logger
from .logger import LoggerContext as LoggerContext
