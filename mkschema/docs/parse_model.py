from typing import Dict, List

from mkschema.env import DEFAULT_ENV, Env
from mkschema.logging import Logger, LogLevel
from mkschema.models import FieldEvent, Model

from .parse_schema import parse_schema
from .parsed_types import FieldSchema, ModelSchema


def parse_model(
    model: Model,
    env: Env | None = None,
    logger: Logger | None = None,
) -> ModelSchema:
    if env is None:
        env = DEFAULT_ENV

    if logger is None:
        logger = Logger(level=env.MKSCHEMA_LOG_LEVEL)

    omitted_fields = env.omitted_fields
    fields = parse_schema(model.schema, env=env)

    required: List[str] = []
    properties: Dict[str, FieldSchema] = {}

    with logger.context(
        template="{timestamp} - {level} - {thread_id} - {model} - {message}",
    ) as ctx:
        ctx.log(
            FieldEvent(
                level=LogLevel.DEBUG,
                model=model.model_name,
                message=f"Documenting {len(fields)} fields",
            )
        )

        for field in fields:
            field_name = field.field

            if field.suppressed or field_name in omitted_fields:
                ctx.log(
                    FieldEvent(
                        level=LogLevel.DEBUG,
                        model=model.model_name,
                        field=field_name,
                        message=f"Skipping field {field_name}",
                    )
                )
                continue

            if field.required:
                required.append(field_name)
                field = field.release_required()

            properties[field_name] = field.detach().to_schema()

    return {
        "title": model.model_name,
        "required": required,
        "properties": properties,
    }


document_model = parse_model
