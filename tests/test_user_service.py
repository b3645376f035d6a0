# =============================================================================
# tests/test_user_service.py - UserService Tests
# =============================================================================
# Business rules independent of HTTP: name validation and trimming, id
# parsing, and the order in which validation and lookup happen.
# =============================================================================

import logging

import pytest

from user_directory.app.core.exceptions import NotFoundError, ValidationError
from user_directory.app.services.user_service import UserService, clean_name, parse_user_id


@pytest.fixture
def service(store):
    return UserService(store)


class TestCleanName:

    @pytest.mark.parametrize("name", [None, "", "   ", "\t\n"])
    def test_blank_names_rejected(self, name):
        with pytest.raises(ValidationError) as exc_info:
            clean_name(name)
        assert exc_info.value.message == "Name is required"
        assert exc_info.value.status_code == 400

    def test_name_is_trimmed(self):
        assert clean_name("  Alice ") == "Alice"

    def test_non_string_rejected(self):
        with pytest.raises(ValidationError):
            clean_name(42)


class TestParseUserId:

    @pytest.mark.parametrize("raw, expected", [("3", 3), (" 7 ", 7), (5, 5), ("-1", -1)])
    def test_integers(self, raw, expected):
        assert parse_user_id(raw) == expected

    @pytest.mark.parametrize("raw, expected", [("2abc", 2), ("1.5", 1), ("1_0", 1), ("+4x", 4)])
    def test_leading_integer_is_used(self, raw, expected):
        assert parse_user_id(raw) == expected

    @pytest.mark.parametrize("raw", ["abc", "", "x2", "-"])
    def test_non_numeric_ids_never_match(self, raw):
        assert parse_user_id(raw) is None


class TestUserServiceOperations:

    @pytest.mark.asyncio
    async def test_create_trims_and_assigns_id(self, service, store):
        user = await service.create_user(" Alice ")
        assert (user.id, user.name) == (4, "Alice")
        assert store.next_id == 5

    @pytest.mark.asyncio
    async def test_create_blank_leaves_store_untouched(self, service, store):
        with pytest.raises(ValidationError):
            await service.create_user("   ")
        assert len(store) == 3
        assert store.next_id == 4

    @pytest.mark.asyncio
    async def test_update_validates_before_lookup(self, service):
        with pytest.raises(ValidationError):
            await service.update_user("999", "")

    @pytest.mark.asyncio
    async def test_update_unknown_id(self, service):
        with pytest.raises(NotFoundError) as exc_info:
            await service.update_user("999", "Valid")
        assert exc_info.value.message == "User not found"
        assert exc_info.value.status_code == 404

    @pytest.mark.asyncio
    async def test_update_non_numeric_id(self, service):
        with pytest.raises(NotFoundError):
            await service.update_user("abc", "Valid")

    @pytest.mark.asyncio
    async def test_update_renames(self, service):
        user = await service.update_user("2", " Janet ")
        assert (user.id, user.name) == (2, "Janet")

    @pytest.mark.asyncio
    async def test_update_logs_previous_name(self, service, caplog):
        with caplog.at_level(logging.INFO, logger="user_directory.app.services.user_service"):
            await service.update_user("2", "Janet")
        assert "'Jane Smith' -> 'Janet'" in caplog.text

    @pytest.mark.asyncio
    async def test_delete_returns_confirmation(self, service):
        result = await service.delete_user("1")
        assert result.message == "User deleted successfully"
        assert (result.user.id, result.user.name) == (1, "John Doe")

    @pytest.mark.asyncio
    async def test_delete_twice(self, service):
        await service.delete_user("3")
        with pytest.raises(NotFoundError):
            await service.delete_user("3")

    @pytest.mark.asyncio
    async def test_list_reflects_mutations(self, service):
        await service.create_user("Dana")
        await service.delete_user("2")
        users = await service.list_users()
        assert [u.id for u in users] == [1, 3, 4]
