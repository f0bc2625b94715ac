"""Domain Models - Pydantic models for catalog and user entities."""
import re
from decimal import Decimal
from typing import Any, NewType, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from quickcart.errors import ERROR_INVALID_PRICE, ERROR_INVALID_PRODUCT_ID, ERROR_PRODUCT_ID_TOO_LONG
from quickcart.services.money import parse_display_price

ProductId = NewType("ProductId", str)

PRODUCT_ID_MAX_LENGTH = 64
_PRODUCT_ID_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")


def product_id(value: Union[str, int]) -> ProductId:
    """
    Validate and normalize a product identifier.

    Integers become their decimal string so seed ids (1, 2, ...) and cart
    keys ("1", "2", ...) compare equal.

    Raises:
        ValueError: if the identifier is empty, too long or has bad characters
    """
    if isinstance(value, bool):
        raise ValueError(ERROR_INVALID_PRODUCT_ID)
    if isinstance(value, int):
        value = str(value)
    if not isinstance(value, str):
        raise ValueError(ERROR_INVALID_PRODUCT_ID)

    value = value.strip()
    if len(value) > PRODUCT_ID_MAX_LENGTH:
        raise ValueError(ERROR_PRODUCT_ID_TOO_LONG)
    if not _PRODUCT_ID_PATTERN.match(value):
        raise ValueError(ERROR_INVALID_PRODUCT_ID)
    return ProductId(value)


class Product(BaseModel):
    """Catalog product. Immutable once loaded."""
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    id: str = Field(validation_alias=AliasChoices("id", "_id"))
    name: str
    description: str = ""
    rating: float = 0.0
    price: Decimal = Field(validation_alias=AliasChoices("price", "offerPrice"))
    image: Optional[str] = Field(default=None, validation_alias=AliasChoices("image", "imgSrc", "image_url"))

    @field_validator("id", mode="before")
    @classmethod
    def _validate_id(cls, value: Any) -> str:
        return product_id(value)

    @field_validator("price", mode="before")
    @classmethod
    def _parse_price(cls, value: Any) -> Decimal:
        price = parse_display_price(value)
        if not price.is_finite() or price < 0:
            raise ValueError(ERROR_INVALID_PRICE)
        return price


class IdentityUser(BaseModel):
    """User object issued by the identity provider."""
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: str
    first_name: Optional[str] = Field(default=None, validation_alias=AliasChoices("first_name", "firstName"))
    last_name: Optional[str] = Field(default=None, validation_alias=AliasChoices("last_name", "lastName"))
    email: Optional[str] = None
    public_metadata: dict = Field(
        default_factory=dict,
        validation_alias=AliasChoices("public_metadata", "publicMetadata"),
    )

    @property
    def role(self) -> Optional[str]:
        """Role claim from public metadata, if any."""
        role = self.public_metadata.get("role")
        return role if isinstance(role, str) else None


class UserData(BaseModel):
    """User profile shown by the storefront."""
    model_config = ConfigDict(extra="ignore")

    id: str
    name: str
    email: Optional[str] = None
    image_url: Optional[str] = None
