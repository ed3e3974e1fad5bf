import datetime
from typing import Any, Dict

import msgspec

from .descriptors import Model, ObjectId, Schema

TYPE_ALIASES: Dict[str, Any] = {
    "Date": datetime.datetime,
    "ObjectId": ObjectId,
    "ObjectID": ObjectId,
}


def resolve_type_aliases(descriptor: Any) -> Any:
    if isinstance(descriptor, str):
        return TYPE_ALIASES.get(descriptor, descriptor)

    if isinstance(descriptor, list):
        return [resolve_type_aliases(element) for element in descriptor]

    if isinstance(descriptor, dict):
        # Only the type slot of a wrapper holds a descriptor, enum and
        # description values stay verbatim.
        if "type" in descriptor:
            return {
                **descriptor,
                "type": resolve_type_aliases(descriptor["type"]),
            }

        return {
            name: resolve_type_aliases(value) for name, value in descriptor.items()
        }

    return descriptor


class ModelDefinition(msgspec.Struct, kw_only=True):
    name: str
    tree: Dict[str, Any] = msgspec.field(default_factory=dict)

    def to_model(self) -> Model:
        return Model(self.name, Schema(resolve_type_aliases(self.tree)))


def load_model_definition(data: bytes | str) -> Model:
    return msgspec.json.decode(data, type=ModelDefinition).to_model()
