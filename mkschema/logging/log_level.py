from enum import Enum


class LogLevel(Enum):
    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"

    @property
    def rank(self) -> int:
        return LOG_LEVEL_RANKS[self]

    def __ge__(self, other: "LogLevel"):
        if not isinstance(other, LogLevel):
            return NotImplemented

        return self.rank >= other.rank


LOG_LEVEL_RANKS = {
    LogLevel.DEBUG: 0,
    LogLevel.INFO: 1,
    LogLevel.WARN: 2,
    LogLevel.ERROR: 3,
}
