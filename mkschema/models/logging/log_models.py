from typing import Any

from mkschema.logging import Entry, LogLevel


class Event(Entry, kw_only=True):
    message: str | bytes | None = None
    level: LogLevel = LogLevel.INFO

    def to_template(self, template: str, context=None):
        kwargs: dict[
            str,
            int | str | bool | float | LogLevel | list | dict | set | Any,
        ] = {field: getattr(self, field) for field in self.__struct_fields__}

        if isinstance(self.message, bytes):
            kwargs["message"] = self.message.decode()

        kwargs["level"] = kwargs["level"].value

        if context:
            kwargs.update(context)

        return template.format(**kwargs)


class FieldEvent(Event, kw_only=True):
    model: str | None = None
    field: str | None = None
