# =============================================================================
# tests/test_user_directory_api.py - API Client Tests
# =============================================================================
# UserDirectoryAPI against the real application (through BridgeSession),
# transport failures, and base URL resolution per build mode.
# =============================================================================

import pytest

from user_directory_api import DEVELOPMENT_BASE_URL, UserDirectoryAPI, resolve_api_base_url
from tests.helpers import BASE_URL, BridgeSession


class TestClientOperations:

    def test_health_check(self, api):
        data, error = api.health_check()
        assert error is None
        assert data == {"op": "Success"}

    def test_list_users(self, api):
        users, error = api.list_users()
        assert error is None
        assert [u["id"] for u in users] == [1, 2, 3]

    def test_create_user(self, api):
        user, error = api.create_user(" Dana ")
        assert error is None
        assert user == {"id": 4, "name": "Dana"}

    def test_create_user_error_carries_server_message(self, api):
        user, error = api.create_user("   ")
        assert user is None
        assert error == {"status_code": 400, "message": "Name is required"}

    def test_update_user(self, api):
        user, error = api.update_user(2, "Janet")
        assert error is None
        assert user == {"id": 2, "name": "Janet"}

    def test_update_missing_user(self, api):
        user, error = api.update_user(99, "Janet")
        assert user is None
        assert error == {"status_code": 404, "message": "User not found"}

    def test_delete_user(self, api):
        result, error = api.delete_user(1)
        assert error is None
        assert result["message"] == "User deleted successfully"
        assert result["user"] == {"id": 1, "name": "John Doe"}

    def test_delete_missing_user(self, api):
        _, error = api.delete_user(1234)
        assert error["status_code"] == 404

    def test_requests_use_expected_paths(self, api, bridge):
        api.list_users()
        api.create_user("Dana")
        api.update_user(4, "Dana B")
        api.delete_user(4)
        assert bridge.calls == [
            ("GET", "/api/users", None),
            ("POST", "/api/users", {"name": "Dana"}),
            ("PUT", "/api/users/4", {"name": "Dana B"}),
            ("DELETE", "/api/users/4", None),
        ]


class TestTransportErrors:

    def test_unreachable_server(self, client):
        api = UserDirectoryAPI(base_url=BASE_URL, session=BridgeSession(client, unreachable=["*"]))
        users, error = api.list_users()
        assert users == []
        assert error["status_code"] is None
        assert "Connection refused" in error["message"]

    def test_base_url_trailing_slash(self, bridge):
        api = UserDirectoryAPI(base_url=BASE_URL + "/", session=bridge)
        api.health_check()
        assert bridge.calls[-1][1] == "/user"


class TestResolveApiBaseUrl:

    def test_development_default(self):
        assert resolve_api_base_url("development", env={}) == DEVELOPMENT_BASE_URL

    def test_mode_defaults_to_development(self):
        assert resolve_api_base_url(env={}) == DEVELOPMENT_BASE_URL

    def test_mode_from_environment(self):
        env = {"USER_DIRECTORY_ENV": "production", "USER_DIRECTORY_ORIGIN": "https://users.example.com/"}
        assert resolve_api_base_url(env=env) == "https://users.example.com"

    def test_override_wins_in_every_mode(self):
        env = {"USER_DIRECTORY_API_URL": "http://api.internal:9000"}
        assert resolve_api_base_url("development", env=env) == "http://api.internal:9000"
        assert resolve_api_base_url("production", env=env) == "http://api.internal:9000"

    def test_production_without_origin(self):
        with pytest.raises(RuntimeError):
            resolve_api_base_url("production", env={})
