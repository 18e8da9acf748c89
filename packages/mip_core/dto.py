from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseDTO(BaseModel):
    """
    Base class for every DTO (Data Transfer Object) in MIP.

    Features:
        - from_attributes=True (ORM objects can be validated directly)
        - str_strip_whitespace=True (surrounding whitespace is removed)
        - camelCase aliases on the wire, snake_case attributes in Python
    """
    model_config = ConfigDict(
        from_attributes=True,
        str_strip_whitespace=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )

    def to_wire(self) -> dict:
        """JSON-compatible dict using camelCase keys."""
        return self.model_dump(mode="json", by_alias=True)
