from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ValidationResult(BaseModel):
    country_code: str = Field(description="Country code of the VAT id, e.g. `DE`")
    vat_number: str = Field(description="VAT number without the country code")
    valid: bool = Field(description="Whether the VAT id is valid")
    server_validated: bool = Field(
        description="Whether the VAT id has been checked by the member state (if not, it is presumed to be valid)"
    )
    name: str = Field(description="Name of the trader")
    address: str = Field(description="Address of the trader on a single line")

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        json_schema_extra={
            "example": {
                "countryCode": "DE",
                "vatNumber": "123456789",
                "valid": True,
                "serverValidated": True,
                "name": "Acme GmbH",
                "address": "Musterstrasse 1, 12345 Berlin",
            }
        },
    )
