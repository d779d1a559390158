from datetime import datetime
from decimal import Decimal
from pydantic import BaseModel, Field, field_validator

from . import settings, utils

DRAFT_FIELDS = ("name", "quantity", "price", "category")


class InventoryItem(BaseModel):
    """
    A committed stock record. Quantity and price are always well-formed numbers here;
    half-typed values only ever live in a DraftItem.
    """

    id: int = Field(..., alias="ID")
    name: str = Field(..., min_length=1, alias="Name")
    quantity: int = Field(..., ge=0, le=settings.MAX_QUANTITY, alias="Quantity")
    price: Decimal = Field(..., ge=0, le=settings.MAX_PRICE, alias="Price")
    category: str = Field(..., min_length=1, alias="Category")

    class Config:
        # Build from plain field names; export with the column-style aliases.
        populate_by_name = True

    @field_validator("price")
    @classmethod
    def drop_negative_zero(cls, value: Decimal) -> Decimal:
        # "-0" passes ge=0 but would display as $-0.00
        return value.copy_abs()

    @property
    def total_value(self) -> Decimal:
        return self.quantity * self.price


class DraftItem(BaseModel):
    """
    Working copy of the editable fields. Any of them may be "" while the user types.
    """

    name: str = ""
    quantity: int | str = ""
    price: Decimal | str = ""
    category: str = ""

    def missing_fields(self) -> list[str]:
        return [field for field in DRAFT_FIELDS if getattr(self, field) == ""]

    def is_complete(self) -> bool:
        # Zero is a real quantity/price, so this checks presence, not truthiness.
        return not self.missing_fields()


class UserSession(BaseModel):
    first_name: str = ""
    last_name: str = ""
    logged_in: bool = False

    @property
    def display_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class StockReport(BaseModel):
    """A generated, point-in-time valuation summary."""

    text: str
    category: str
    generated_at: datetime
    grand_total: Decimal
    item_count: int
    first_name: str
    last_name: str

    @property
    def filename(self) -> str:
        first = utils.sanitize_filename_part(self.first_name)
        last = utils.sanitize_filename_part(self.last_name)
        return f"{settings.REPORT_FILENAME_PREFIX}{first}_{last}.txt"

    @property
    def mime_type(self) -> str:
        return settings.REPORT_MIME_TYPE
