"""
Tests for identity handling and the seller flag
"""
import pytest
from pydantic import ValidationError

from quickcart.auth import PLACEHOLDER_USER_DATA, coerce_identity_user, is_seller
from quickcart.cart import StateChange
from quickcart.models import IdentityUser


class TestIsSeller:
    """Tests for role claim detection."""

    def test_seller_role(self, seller_user):
        assert is_seller(IdentityUser.model_validate(seller_user)) is True

    def test_no_role_claim(self, buyer_user):
        assert is_seller(IdentityUser.model_validate(buyer_user)) is False

    def test_other_role(self):
        user = IdentityUser(id="u1", public_metadata={"role": "admin"})
        assert is_seller(user) is False

    def test_non_string_role(self):
        user = IdentityUser(id="u1", public_metadata={"role": ["seller"]})
        assert is_seller(user) is False

    def test_signed_out(self):
        assert is_seller(None) is False


class TestCoerceIdentityUser:
    """Tests for accepting raw provider objects."""

    def test_raw_mapping(self, seller_user):
        user = coerce_identity_user(seller_user)

        assert isinstance(user, IdentityUser)
        assert user.first_name == "Sam"
        assert user.role == "seller"

    def test_passthrough(self):
        user = IdentityUser(id="u1")
        assert coerce_identity_user(user) is user
        assert coerce_identity_user(None) is None

    def test_missing_id(self):
        with pytest.raises(ValidationError):
            coerce_identity_user({"publicMetadata": {"role": "seller"}})


class TestAppStateUser:
    """Tests for AppState.set_user."""

    def test_seller_signs_in(self, app_state, seller_user):
        app_state.set_user(seller_user)

        assert app_state.is_seller is True
        assert app_state.user.id == "user_seller_1"

    def test_buyer_signs_in(self, app_state, buyer_user):
        app_state.set_user(buyer_user)

        assert app_state.is_seller is False

    def test_sign_out_clears_flag(self, app_state, seller_user):
        app_state.set_user(seller_user)
        app_state.set_user(None)

        assert app_state.is_seller is False
        assert app_state.user is None

    def test_switching_users_recomputes(self, app_state, seller_user, buyer_user):
        app_state.set_user(seller_user)
        app_state.set_user(buyer_user)

        assert app_state.is_seller is False

    def test_same_user_does_not_renotify(self, app_state, seller_user):
        """Test the flag is only recomputed when the user changes."""
        changes = []
        app_state.subscribe(lambda change, state: changes.append(change))

        app_state.set_user(seller_user)
        app_state.set_user(dict(seller_user))

        assert changes == [StateChange.USER, StateChange.SELLER]

    def test_manual_override(self, app_state, buyer_user):
        app_state.set_user(buyer_user)
        app_state.set_is_seller(True)

        assert app_state.is_seller is True


def test_placeholder_user_data():
    assert PLACEHOLDER_USER_DATA.name
    assert PLACEHOLDER_USER_DATA.email == "shopper@example.com"
