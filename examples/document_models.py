import datetime

from mkschema import (
    Model,
    ObjectId,
    ParsedAPIMetadata,
    Schema,
    create_api_definition,
    dump_schema,
)

address = Schema(
    {
        "street": str,
        "city": {"type": str, "required": True},
        "zip": str,
    }
)

customer = Schema(
    {
        "_id": ObjectId,
        "email": {"type": str, "required": True, "description": "Login email"},
        "status": {"type": str, "enum": ["active", "suspended"]},
        "address": {"type": address},
        "created_at": datetime.datetime,
        "__v": int,
    }
)
customer.virtual("display_name").get(lambda doc: doc.email)

order = Schema(
    {
        "_id": ObjectId,
        "customer": {"type": ObjectId, "required": True},
        "lines": [
            {
                "sku": {"type": str, "required": True},
                "quantity": {"type": int, "required": True},
                "price": float,
            }
        ],
        "paid": bool,
    }
)


if __name__ == "__main__":
    definition = create_api_definition(
        ParsedAPIMetadata(
            title="Storefront",
            version="1.0.0",
            description="Storefront data models",
        ),
        [
            Model("Customer", customer),
            Model("Order", order),
        ],
    )

    print(dump_schema(definition, indent=True).decode())
