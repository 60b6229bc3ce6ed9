"""Order data models."""

from typing import Annotated, Any, Optional

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Integers stored as BSON int64
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

Int64 = Annotated[int, Field(ge=INT64_MIN, le=INT64_MAX)]


class OrderBase(BaseModel):
    """Order fields supplied by callers.

    Missing values default to zero/empty so that the validator, not request
    parsing, decides which business fields are mandatory.
    """

    status: str = ""
    qty: Int64 = 0
    total_price: float = 0.0

    # Buyer snapshot
    buyer_id: Int64 = 0
    buyer_full_name: str = ""
    buyer_address: str = ""

    # Product snapshot
    product_id: Int64 = 0
    product_sku: str = ""
    product_name: str = ""
    product_price: float = 0.0
    product_weight: float = 0.0
    product_description: str = ""
    product_stock: Int64 = 0
    product_user_id: Int64 = 0
    product_user_full_name: str = ""
    product_images_path: list[str] = Field(default_factory=list)


class OrderCreate(OrderBase):
    """Order creation payload. Identity fields sent by clients are dropped."""

    model_config = ConfigDict(extra="ignore")


class Order(OrderBase):
    """Order as stored in the orders collection."""

    id: Optional[str] = Field(default=None, alias="_id")
    order_number: str = ""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "_id": "6523f0c2a1b2c3d4e5f60718",
                "order_number": "aZ3kP9qLm2Xw7Rt",
                "status": "in-cart",
                "qty": 2,
                "total_price": 2000001.0,
                "buyer_id": 1,
                "buyer_full_name": "George Marcus",
                "buyer_address": "Buyer Street",
                "product_id": 1,
                "product_sku": "testsku",
                "product_name": "product name",
                "product_price": 1000000.5,
                "product_weight": 1.5,
                "product_description": "product description",
                "product_stock": 100,
                "product_user_id": 10,
                "product_user_full_name": "Seller Name",
                "product_images_path": ["product 1.1.jpg", "product 1.2.jpg"],
            }
        },
    )

    @field_validator("id", mode="before")
    @classmethod
    def stringify_object_id(cls, v: Any) -> Any:
        """Expose MongoDB ObjectIds as strings."""
        if isinstance(v, ObjectId):
            return str(v)
        return v

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> "Order":
        """Build an order from a raw collection document."""
        return cls.model_validate(document)

    def to_document(self) -> dict[str, Any]:
        """Document to persist, without the store-assigned ``_id``."""
        return self.model_dump(exclude={"id"})


class OrderUpdate(BaseModel):
    """Partial order update.

    Only the fields a caller actually sends are candidates for the merge;
    see ``merge_fields``.
    """

    status: Optional[str] = None
    qty: Optional[Int64] = Field(None, ge=1)
    total_price: Optional[float] = Field(None, ge=0)
    buyer_id: Optional[Int64] = None
    buyer_full_name: Optional[str] = None
    buyer_address: Optional[str] = None
    product_id: Optional[Int64] = None
    product_sku: Optional[str] = None
    product_name: Optional[str] = None
    product_price: Optional[float] = Field(None, ge=0)
    product_weight: Optional[float] = Field(None, ge=0)
    product_description: Optional[str] = None
    product_stock: Optional[Int64] = Field(None, ge=0)
    product_user_id: Optional[Int64] = None
    product_user_full_name: Optional[str] = None
    product_images_path: Optional[list[str]] = None

    model_config = ConfigDict(extra="ignore")

    def merge_fields(self) -> dict[str, Any]:
        """Fields to ``$set`` on the stored order.

        Unsent fields, explicit nulls and blank strings mean "leave unchanged".
        Numbers that were sent are applied even when zero.
        """
        fields = {}
        for name, value in self.model_dump(exclude_unset=True).items():
            if value is None:
                continue
            if isinstance(value, str) and not value.strip():
                continue
            fields[name] = value
        return fields


class MessageResponse(BaseModel):
    """Simple message response for update and delete."""

    message: str
    count: Optional[int] = None
