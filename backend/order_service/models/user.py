"""User data models."""

from pydantic import BaseModel, ConfigDict, Field

BUYER_ROLE = "buyer"


class AuthorizedUser(BaseModel):
    """User returned by the account service after a successful authorization."""

    id: int = Field(..., description="Account service user identifier")
    email: str = ""
    full_name: str = ""
    address: str = ""
    phone_number: str = ""
    role: str = ""

    model_config = ConfigDict(
        extra="ignore",
        json_schema_extra={
            "example": {
                "id": 1,
                "email": "george.marcus@example.com",
                "full_name": "George Marcus",
                "address": "Buyer Street",
                "phone_number": "+6281234567890",
                "role": "buyer",
            }
        },
    )

    @property
    def is_buyer(self) -> bool:
        return self.role == BUYER_ROLE
