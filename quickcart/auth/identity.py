"""Identity provider helpers: role detection and placeholder profile data."""
from typing import Any, Optional, Union

from quickcart.models import IdentityUser, UserData

SELLER_ROLE = "seller"

# Profile data until the user profile endpoint is wired in
PLACEHOLDER_USER_DATA = UserData(
    id="user_placeholder",
    name="QuickCart Shopper",
    email="shopper@example.com",
    image_url=None,
)


def coerce_identity_user(user: Union[IdentityUser, dict, None]) -> Optional[IdentityUser]:
    """Accept the provider's user object either parsed or as a raw mapping."""
    if user is None or isinstance(user, IdentityUser):
        return user
    return IdentityUser.model_validate(user)


def is_seller(user: Optional[Any]) -> bool:
    """True only for a signed-in user whose role claim is "seller"."""
    if user is None:
        return False
    return getattr(user, "role", None) == SELLER_ROLE
