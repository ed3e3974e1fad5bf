"""
Shared fixtures for mkschema tests.
"""

import datetime
import io

import pytest

from mkschema import Model, ObjectId, Schema, VirtualType
from mkschema.logging import Logger


@pytest.fixture
def item_model():
    """The item model used throughout the README."""
    return Model(
        "Item",
        Schema(
            {
                "name": {"type": "String", "required": True},
                "age": {"type": "Number"},
                "tags": {"type": [{"type": "String"}]},
                "__v": {"type": "Number"},
            }
        ),
    )


@pytest.fixture
def user_model():
    """
    User model with identifiers, dates, an embedded address,
    an array of sub-documents and a virtual.
    """
    schema = Schema(
        {
            "_id": ObjectId,
            "id": {"type": str, "required": True},
            "email": {"type": str, "required": True, "description": "Login email"},
            "role": {"type": str, "enum": ["admin", "member"]},
            "created_at": {"type": datetime.datetime},
            "address": {
                "street": str,
                "zip": {"type": str, "required": True},
            },
            "tags": {
                "type": [
                    {
                        "name": {"type": str, "required": True},
                        "color": str,
                    }
                ]
            },
            "__v": {"type": int, "required": True},
        }
    )
    schema.virtual("full_name").get(lambda user: user.email)

    return Model("User", schema)


@pytest.fixture
def log_stream():
    return io.StringIO()


@pytest.fixture
def debug_logger(log_stream):
    return Logger(level="debug", stream=log_stream)
