from __future__ import annotations

from typing import Callable, Dict, Literal, Set, Union

import msgspec
import orjson

PrimaryType = Union[str, int, float, bytes, bool]


def parse_bool(value: str) -> bool:
    return True if value.lower() == "true" else False


def parse_names(value: str) -> Set[str]:
    return {name.strip() for name in value.split(",") if name.strip()}


class Env(msgspec.Struct, kw_only=True):
    MKSCHEMA_OMITTED_FIELDS: str = "__v"
    MKSCHEMA_SKIPPED_KEYS: str = "id"
    MKSCHEMA_STRICT_TYPES: bool = False
    MKSCHEMA_OPENAPI_VERSION: str = "3.1.0"
    MKSCHEMA_LOG_LEVEL: Literal["debug", "info", "warn", "error"] = "info"

    @classmethod
    def types_map(cls) -> Dict[str, Callable[[str], PrimaryType]]:
        return {
            "MKSCHEMA_OMITTED_FIELDS": str,
            "MKSCHEMA_SKIPPED_KEYS": str,
            "MKSCHEMA_STRICT_TYPES": parse_bool,
            "MKSCHEMA_OPENAPI_VERSION": str,
            "MKSCHEMA_LOG_LEVEL": lambda value: value.lower(),
        }

    @property
    def omitted_fields(self) -> Set[str]:
        return parse_names(self.MKSCHEMA_OMITTED_FIELDS)

    @property
    def skipped_keys(self) -> Set[str]:
        return parse_names(self.MKSCHEMA_SKIPPED_KEYS)

    def model_dump(self, exclude_none: bool = False):
        if exclude_none:
            return {
                key: value
                for key, value in msgspec.structs.asdict(self).items()
                if value is not None
            }

        return msgspec.structs.asdict(self)

    def model_dump_json(self, exclude_none: bool = False):
        return orjson.dumps(self.model_dump(exclude_none=exclude_none))


DEFAULT_ENV = Env()
