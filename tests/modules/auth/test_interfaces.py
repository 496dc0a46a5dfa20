from unittest.mock import MagicMock

from modules.auth.interfaces import IAuthService, IIdentityStore
from modules.auth.repository import UserRepository
from modules.auth.service import AuthService
from modules.auth.tokens import TokenService
from tests.conftest import InMemoryIdentityStore


class TestAuthInterface:
    def test_interface_methods_exist(self):
        """IAuthService should define required methods."""
        for method in ["signup", "login"]:
            assert hasattr(IAuthService, method)

    def test_service_satisfies_interface(self):
        service = AuthService(InMemoryIdentityStore(), TokenService("secret"))
        assert isinstance(service, IAuthService)

    def test_auth_service_has_no_token_validation(self):
        """Token validation belongs to the gate, not the user-facing service."""
        assert not hasattr(IAuthService, "validate_token")


class TestIdentityStoreInterface:
    def test_repository_satisfies_interface(self):
        assert isinstance(UserRepository(MagicMock()), IIdentityStore)

    def test_fake_satisfies_interface(self):
        assert isinstance(InMemoryIdentityStore(), IIdentityStore)
