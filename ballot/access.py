"""Administrator checks, delegated to an access-control collaborator."""

from abc import ABC, abstractmethod

from ballot.errors import AuthorizationError


class AccessControl(ABC):
    """Answers whether a caller is the administrator of a session.

    The session never decides this itself; any identity scheme can be
    plugged in by subclassing.
    """

    @abstractmethod
    def is_admin(self, caller: str) -> bool:
        """Return True if caller may perform administrator operations."""
        pass

    def require_admin(self, caller: str) -> None:
        if not self.is_admin(caller):
            raise AuthorizationError(f"{caller!r} is not the administrator")


class OwnerAccessControl(AccessControl):
    """Single-owner access control: the owner is the administrator.

    Ownership can be handed over by the current owner.
    """

    def __init__(self, owner: str):
        if not owner:
            raise ValueError("owner must be a non-empty identity")
        self._owner = owner

    @property
    def owner(self) -> str:
        return self._owner

    def is_admin(self, caller: str) -> bool:
        return caller == self._owner

    def transfer_ownership(self, caller: str, new_owner: str) -> str:
        """Make new_owner the administrator. Returns the previous owner."""
        self.require_admin(caller)
        if not new_owner:
            raise ValueError("new owner must be a non-empty identity")
        previous, self._owner = self._owner, new_owner
        return previous
