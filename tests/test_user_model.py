"""Unit tests for the User entity: normalization and back-references."""

import pytest

from usermodel.api.v1.models import Role, User, Useremail, UserRoles


class TestUsernameNormalization:
    """username is lower-cased on write and on read."""

    @pytest.mark.parametrize("value", ["Alice", "ALICE", "alice", "MiXeD_Case-42", "ÉLODIE", ""])
    def test_write_then_read_is_lower_case(self, value):
        user = User()
        user.username = value

        assert user.username == value.lower()

    def test_stored_value_is_lower_case(self):
        user = User(username="BoB")

        assert user._username == "bob"

    def test_read_lowers_a_mixed_case_stored_value(self):
        user = User()
        user._username = "Carol"

        assert user.username == "carol"

    def test_unset_reads_none(self):
        assert User().username is None

    def test_writing_none_leaves_it_unset(self):
        user = User(username="dave")
        user.username = None

        assert user.username is None


class TestPrimaryemailNormalization:
    """primaryemail follows the same discipline as username."""

    @pytest.mark.parametrize("value", ["Alice@Example.COM", "bob@example.com", "X.Y+Z@Sub.Example.org"])
    def test_write_then_read_is_lower_case(self, value):
        user = User()
        user.primaryemail = value

        assert user.primaryemail == value.lower()
        assert user._primaryemail == value.lower()

    def test_constructor_lowers_primaryemail(self):
        user = User("erin", "pw", "Erin@Example.com")

        assert user.primaryemail == "erin@example.com"

    def test_unset_reads_none(self):
        assert User().primaryemail is None


class TestUserConstructor:
    """The roles-accepting constructor back-links every junction."""

    def test_every_junction_points_to_new_user(self):
        junctions = [UserRoles(role=Role(name="ADMIN")), UserRoles(role=Role(name="USER"))]

        user = User("frank", "pw", "frank@example.com", junctions)

        assert all(ur.user is user for ur in junctions)

    def test_roles_keep_order_without_duplicates(self):
        admin, data = Role(name="ADMIN"), Role(name="DATA")
        junctions = [UserRoles(role=admin), UserRoles(role=data)]

        user = User("grace", "pw", "grace@example.com", junctions)

        assert user.roles == junctions
        assert [ur.role for ur in user.roles] == [admin, data]

    def test_no_roles_gives_empty_collections(self):
        user = User("heidi", "pw", "heidi@example.com")

        assert user.roles == []
        assert user.useremails == []

    def test_password_is_kept_as_given(self):
        user = User("ivan", "CaseSensitive!", "ivan@example.com")

        assert user.password == "CaseSensitive!"


class TestUseremail:
    """Owned e-mails are lower-cased and linked to their owner."""

    def test_useremail_is_lower_cased(self):
        email = Useremail(useremail="Judy@Example.COM")

        assert email.useremail == "judy@example.com"

    def test_setting_owner_appends_to_owner_collection(self):
        user = User("judy", "pw", "judy@example.com")

        email = Useremail(user=user, useremail="judy.work@example.com")

        assert user.useremails == [email]
        assert email.user is user
