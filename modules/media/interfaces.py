"""
Media module interface.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class IBlobStore(Protocol):
    """Object storage for uploaded media."""

    def put_object(self, name: str, data: bytes, content_type: str) -> str:
        """
        Store ``data`` under ``name``.

        Returns:
            A URL the object can be fetched from
        """
        ...
