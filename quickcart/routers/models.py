"""
API Pydantic Models

Request bodies for the storefront endpoints.
"""
from typing import Dict, Optional, Union

from pydantic import BaseModel, Field

from quickcart.models import IdentityUser


# ==================== CART MODELS ====================

class AddToCartRequest(BaseModel):
    product_id: Union[str, int]


class UpdateCartItemRequest(BaseModel):
    product_id: Union[str, int]
    quantity: int = Field(ge=0)  # 0 removes the item


class ReplaceCartRequest(BaseModel):
    items: Dict[str, int] = Field(default_factory=dict)


# ==================== SESSION MODELS ====================

class SessionRequest(BaseModel):
    user: Optional[IdentityUser] = None  # None = signed out
