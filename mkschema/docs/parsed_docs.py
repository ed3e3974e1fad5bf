from typing import Any, Dict, List

import orjson

from mkschema.env import DEFAULT_ENV, Env
from mkschema.logging import Logger, LogLevel
from mkschema.models import DuplicateModelError, Event, Model

from .parse_model import parse_model
from .parsed_api_metadata import ParsedAPIMetadata
from .parsed_types import ModelSchema


def remove_none(obj):
    if isinstance(obj, (list, tuple, set)):
        return type(obj)(remove_none(x) for x in obj if x is not None)
    elif isinstance(obj, dict):
        return type(obj)(
            (remove_none(k), remove_none(v))
            for k, v in obj.items()
            if k is not None and v is not None
        )
    else:
        return obj


def create_api_definition(
    api_metadata: ParsedAPIMetadata,
    models: List[Model],
    env: Env | None = None,
    logger: Logger | None = None,
) -> Dict[str, Any]:
    if env is None:
        env = DEFAULT_ENV

    if logger is None:
        logger = Logger(level=env.MKSCHEMA_LOG_LEVEL)

    schema_components: Dict[str, ModelSchema] = {}

    with logger.context() as ctx:
        for model in models:
            if model.model_name in schema_components:
                ctx.log(
                    Event(
                        level=LogLevel.ERROR,
                        message=f"Model {model.model_name} is already documented",
                    )
                )

                raise DuplicateModelError(
                    model.model_name,
                    [model.model_name for model in models],
                )

            schema_components[model.model_name] = parse_model(
                model,
                env=env,
                logger=logger,
            )

        ctx.log(
            Event(
                level=LogLevel.DEBUG,
                message=f"Documented {len(schema_components)} models for {api_metadata.title}",
            )
        )

    info = remove_none(
        {
            "title": api_metadata.title,
            "summary": api_metadata.summary,
            "description": api_metadata.description,
            "contact": {
                "name": api_metadata.owner,
                "url": str(api_metadata.owner_url) if api_metadata.owner_url else None,
            }
            if api_metadata.owner
            else None,
            "license": {
                "name": api_metadata.license,
                "identifier": api_metadata.license_identifier,
                "url": str(api_metadata.license_url) if api_metadata.license_url else None,
            }
            if api_metadata.license
            else None,
            "version": api_metadata.version,
        }
    )

    return {
        "openapi": env.MKSCHEMA_OPENAPI_VERSION,
        "info": info,
        "components": {
            "schemas": schema_components,
        },
    }


def dump_schema(document: Dict[str, Any], indent: bool = False) -> bytes:
    if indent:
        return orjson.dumps(document, option=orjson.OPT_INDENT_2)

    return orjson.dumps(document)
