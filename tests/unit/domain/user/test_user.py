"""Unit tests for the User aggregate and its value objects."""

import pytest

from dockeriq.domain.user import (
    Email,
    InvalidEmailError,
    InvalidRoleError,
    User,
    UserRole,
)
from tests.shared.fixtures import make_user


class TestEmail:
    def test_normalizes_case_and_whitespace(self):
        assert Email("  Dana.Doe@Example.COM ").value == "dana.doe@example.com"

    @pytest.mark.parametrize("value", ["", "no-at-sign", "a@b", "a b@example.com"])
    def test_rejects_invalid(self, value):
        with pytest.raises(InvalidEmailError):
            Email(value)


class TestUserRole:
    @pytest.mark.parametrize("value", ["SUPERVISOR", "supervisor", " Supervisor "])
    def test_parse_is_case_insensitive(self, value):
        assert UserRole.parse(value) is UserRole.SUPERVISOR

    def test_parse_unknown_role(self):
        with pytest.raises(InvalidRoleError, match="Invalid role: ADMIN"):
            UserRole.parse("ADMIN")

    def test_values_are_canonical_upper_case(self):
        assert [role.value for role in UserRole] == ["SUPERVISOR", "WORKER"]


class TestUser:
    def test_create_defaults(self):
        user = User.create(email="Worker@Example.com", password="secret-password")

        assert user.email == "worker@example.com"
        assert user.role is UserRole.WORKER
        assert user.is_active
        assert not user.is_supervisor
        assert not user.password_reset

    def test_role_is_stored_canonically(self):
        user = User.create(email="a@example.com", password="x", role="supervisor")
        assert user.role is UserRole.SUPERVISOR
        assert user.is_supervisor

    def test_change_role(self):
        user = make_user()
        before = user.updated_at

        user.change_role(UserRole.SUPERVISOR)

        assert user.role is UserRole.SUPERVISOR
        assert user.updated_at >= before

    def test_activate_and_deactivate(self):
        user = make_user()

        user.deactivate()
        assert not user.is_active

        user.activate()
        assert user.is_active

    def test_update_profile_replaces_all_fields(self):
        user = make_user(first_name="Dana", last_name="Doe")

        user.update_profile(first_name="Robin", phone_number="+49 40 123")

        assert user.first_name == "Robin"
        assert user.last_name is None
        assert user.address is None
        assert user.phone_number == "+49 40 123"

    def test_set_password(self):
        user = make_user(password="old")
        user.set_password("$2b$12$hash")
        assert user.password == "$2b$12$hash"

    def test_equality_by_id(self):
        user = make_user()
        same = User(
            id=user.id,
            email="other@example.com",
            password="x",
        )

        assert user == same
        assert hash(user) == hash(same)
        assert user != make_user()
