"""Authentication package."""
from .identity import PLACEHOLDER_USER_DATA, SELLER_ROLE, coerce_identity_user, is_seller

__all__ = [
    "PLACEHOLDER_USER_DATA",
    "SELLER_ROLE",
    "coerce_identity_user",
    "is_seller",
]
