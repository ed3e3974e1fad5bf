import datetime
import threading

import msgspec

from .log_level import LogLevel


def current_timestamp() -> str:
    return datetime.datetime.now(datetime.timezone.utc).isoformat()


class Entry(msgspec.Struct, kw_only=True):
    level: LogLevel = LogLevel.INFO
    timestamp: str = msgspec.field(default_factory=current_timestamp)
    thread_id: int = msgspec.field(default_factory=threading.get_ident)

    def to_template(self, template: str, context=None):
        kwargs = {field: getattr(self, field) for field in self.__struct_fields__}
        kwargs["level"] = self.level.value

        if context:
            kwargs.update(context)

        return template.format(**kwargs)
