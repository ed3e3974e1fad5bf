from pydantic import AnyUrl, BaseModel, StrictStr


class ParsedAPIMetadata(BaseModel):
    title: StrictStr
    version: StrictStr
    summary: StrictStr | None = None
    description: StrictStr | None = None
    owner: StrictStr | None = None
    owner_url: AnyUrl | None = None
    license: StrictStr | None = None
    license_identifier: StrictStr | None = None
    license_url: AnyUrl | None = None
