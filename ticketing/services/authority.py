"""Capability checks for administrative operations.

Services receive an Authority instead of consulting a global owner, so a
multi-role scheme can replace OwnerAuthority without touching them.
"""

from typing import Protocol

from ticketing.domain.errors import UnauthorizedError


class Authority(Protocol):
    def is_authority(self, identity: str) -> bool:
        """Return True if identity may manage events and redeem tickets."""
        ...


class OwnerAuthority:
    """Grants the administrative authority to a single owner identity."""

    def __init__(self, owner: str) -> None:
        if not owner:
            raise ValueError("Owner identity must not be empty")
        self.owner = owner

    def is_authority(self, identity: str) -> bool:
        return identity == self.owner


def require_authority(authority: Authority, caller: str) -> None:
    """Raise UnauthorizedError unless caller holds the authority."""
    if not authority.is_authority(caller):
        raise UnauthorizedError()
