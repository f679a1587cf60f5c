from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """Base for everything crossing the WebSocket: snake_case here, camelCase in JSON.

    Unknown fields are rejected so a malformed control message never half-applies.
    """

    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel, extra="forbid")

    def dump(self) -> dict:
        return self.model_dump(by_alias=True)
