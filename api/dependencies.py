"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations.

Tests swap in fakes by building a ServiceContainer with explicit stores and
installing it with set_container().
"""

from datetime import timedelta
from typing import TYPE_CHECKING, Optional

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.auth.interfaces import IAuthService, IIdentityStore
    from modules.auth.tokens import TokenService, Clock
    from modules.messages.interfaces import IContentStore, IMessageService
    from modules.media.interfaces import IBlobStore
    from modules.media.service import MediaService


class ServiceContainer:
    """
    Container for all service instances.

    Services are created lazily on first access and cached for the life of
    the container. Stores default to the Supabase-backed implementations;
    pass them in to override.
    """

    def __init__(
        self,
        identity_store: "Optional[IIdentityStore]" = None,
        content_store: "Optional[IContentStore]" = None,
        blob_store: "Optional[IBlobStore]" = None,
        jwt_secret: Optional[str] = None,
        clock: "Optional[Clock]" = None,
    ) -> None:
        self._identity_store = identity_store
        self._content_store = content_store
        self._blob_store = blob_store
        self._jwt_secret = jwt_secret
        self._clock = clock

        self._token_service: "TokenService | None" = None
        self._auth_service: "IAuthService | None" = None
        self._message_service: "IMessageService | None" = None
        self._media_service: "MediaService | None" = None

    @property
    def tokens(self) -> "TokenService":
        """Get the token service, signing with the configured secret."""
        if self._token_service is None:
            from shared.config import get_settings
            from modules.auth.exceptions import AuthNotConfiguredError
            from modules.auth.tokens import TokenService

            settings = get_settings()
            secret = self._jwt_secret if self._jwt_secret is not None else settings.jwt_secret
            if not secret:
                raise AuthNotConfiguredError()

            self._token_service = TokenService(
                secret,
                lifetime=timedelta(hours=settings.token_lifetime_hours),
                clock=self._clock,
            )
        return self._token_service

    @property
    def identity_store(self) -> "IIdentityStore":
        """Get the Identity Store."""
        if self._identity_store is None:
            from modules.auth.repository import UserRepository
            from shared.database import get_supabase_client
            self._identity_store = UserRepository(get_supabase_client())
        return self._identity_store

    @property
    def content_store(self) -> "IContentStore":
        """Get the Content Store."""
        if self._content_store is None:
            from modules.messages.repository import MessageRepository
            from shared.database import get_supabase_client
            self._content_store = MessageRepository(get_supabase_client())
        return self._content_store

    @property
    def blob_store(self) -> "IBlobStore":
        """Get the media Blob Store."""
        if self._blob_store is None:
            from modules.media.storage import SupabaseBlobStore
            from shared.config import get_settings
            from shared.database import get_supabase_client
            self._blob_store = SupabaseBlobStore(
                get_supabase_client(), get_settings().media_bucket
            )
        return self._blob_store

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.service import AuthService
            from shared.config import get_settings
            self._auth_service = AuthService(
                self.identity_store,
                self.tokens,
                bcrypt_rounds=get_settings().bcrypt_rounds,
            )
        return self._auth_service

    @property
    def messages(self) -> "IMessageService":
        """Get the message service instance."""
        if self._message_service is None:
            from modules.messages.service import MessageService
            from shared.config import get_settings
            self._message_service = MessageService(
                self.content_store,
                page_size=get_settings().messages_page_size,
            )
        return self._message_service

    @property
    def media(self) -> "MediaService":
        """Get the media service instance."""
        if self._media_service is None:
            from modules.media.service import MediaService
            self._media_service = MediaService(self.blob_store)
        return self._media_service


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def set_container(container: ServiceContainer) -> None:
    """Install a pre-built container (used by tests)."""
    global _container
    _container = container


def reset_container() -> None:
    """
    Reset the service container.

    The next call to get_container() creates a fresh container with new
    service instances.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_token_service() -> "TokenService":
    """FastAPI dependency for the token service."""
    return get_container().tokens


def get_auth_service() -> "IAuthService":
    """FastAPI dependency for auth service."""
    return get_container().auth


def get_message_service() -> "IMessageService":
    """FastAPI dependency for message service."""
    return get_container().messages


def get_media_service() -> "MediaService":
    """FastAPI dependency for media service."""
    return get_container().media
