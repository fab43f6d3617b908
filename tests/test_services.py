"""
Tests for the catalog and accounts services.
"""
import base64

from cafe.models import User, UserSession
from cafe.services import accounts, catalog


class TestCatalog:

    def test_get_products_returns_all_in_id_order(self, db_session):
        products = catalog.get_products(db_session)
        assert [p.name for p in products] == ["Flat White", "Butter Croissant"]
        assert products[0].id < products[1].id

    def test_get_product_by_id(self, db_session):
        product = catalog.get_product_by_id(db_session, 1)
        assert product is not None
        assert product.name == "Flat White"
        assert product.price == 3.8

    def test_get_product_by_id_missing(self, db_session):
        assert catalog.get_product_by_id(db_session, 999) is None


class TestUserLookup:

    def test_get_user_by_username(self, db_session):
        user = accounts.get_user_by_username(db_session, "matthew")
        assert user is not None
        assert user.username == "matthew"

    def test_get_user_by_username_missing(self, db_session):
        assert accounts.get_user_by_username(db_session, "nobody") is None

    def test_check_password_is_exact_match(self, db_session):
        user = accounts.get_user_by_username(db_session, "matthew")
        assert accounts.check_password(user, "latte") is True
        assert accounts.check_password(user, "Latte") is False
        assert accounts.check_password(user, "") is False


class TestSessionTokens:

    def test_generate_session_token_format(self):
        token = accounts.generate_session_token()
        assert len(token) == 24
        assert len(base64.b64decode(token, validate=True)) == 16

    def test_generate_session_token_is_random(self):
        tokens = {accounts.generate_session_token() for _ in range(50)}
        assert len(tokens) == 50


class TestSessionStorage:

    def test_set_session_then_resolve_user(self, db_session):
        user = accounts.get_user_by_username(db_session, "matthew")
        token = accounts.generate_session_token()

        accounts.set_session(db_session, token, user.id)

        resolved = accounts.get_user_by_session_token(db_session, token)
        assert resolved is not None
        assert resolved.id == user.id

    def test_unknown_token_resolves_to_none(self, db_session):
        assert accounts.get_user_by_session_token(db_session, "unknown") is None

    def test_missing_token_resolves_to_none(self, db_session):
        assert accounts.get_user_by_session_token(db_session, None) is None
        assert accounts.get_user_by_session_token(db_session, "") is None

    def test_multiple_sessions_per_user(self, db_session):
        user = accounts.get_user_by_username(db_session, "matthew")
        first = accounts.generate_session_token()
        second = accounts.generate_session_token()

        accounts.set_session(db_session, first, user.id)
        accounts.set_session(db_session, second, user.id)

        assert accounts.get_user_by_session_token(db_session, first).id == user.id
        assert accounts.get_user_by_session_token(db_session, second).id == user.id
        assert db_session.query(UserSession).filter_by(user_id=user.id).count() == 2

    def test_set_session_overwrites_existing_token(self, db_session):
        matthew = accounts.get_user_by_username(db_session, "matthew")
        alice = accounts.get_user_by_username(db_session, "alice")
        token = accounts.generate_session_token()

        accounts.set_session(db_session, token, matthew.id)
        accounts.set_session(db_session, token, alice.id)

        assert db_session.query(UserSession).count() == 1
        assert accounts.get_user_by_session_token(db_session, token).username == "alice"

    def test_session_row_has_created_at(self, db_session):
        user = db_session.query(User).filter_by(username="matthew").first()
        token = accounts.generate_session_token()

        accounts.set_session(db_session, token, user.id)

        row = db_session.get(UserSession, token)
        assert row.created_at is not None
