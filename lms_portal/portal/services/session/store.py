"""Single-writer container for the current user session."""
from typing import Callable, List, Optional

from portal.services.session.models import PortalType, UserSession
from portal.core.logging import get_logger

logger = get_logger(__name__)

SessionListener = Callable[[Optional[UserSession]], None]


class SessionStore:
    """
    Holds at most one current user.

    All changes go through set_user, clear_user and set_portal; listeners
    registered with subscribe are called with the new state after each
    change. There is no authentication: any caller may set any identity.
    """

    def __init__(self):
        self._user: Optional[UserSession] = None
        self._listeners: List[SessionListener] = []

    @property
    def user(self) -> Optional[UserSession]:
        return self._user

    def set_user(self, user: Optional[UserSession]) -> None:
        """Replace the current user wholesale."""
        self._user = user
        logger.info(
            "Session user set",
            extra={
                "user_id": user.id if user else None,
                "role": user.role.value if user and user.role else None,
                "portal": user.portal.value if user and user.portal else None,
            }
        )
        self._notify()

    def clear_user(self) -> None:
        """Forget the current user (logout)."""
        self._user = None
        logger.info("Session user cleared")
        self._notify()

    def set_portal(self, portal: PortalType) -> None:
        """Switch the active portal, keeping the rest of the identity."""
        if self._user is None:
            logger.debug("Portal change ignored, no user in session")
            return
        self._user = self._user.model_copy(update={"portal": PortalType(portal)})
        logger.info("Session portal changed", extra={"portal": self._user.portal.value})
        self._notify()

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        """
        Register a change listener.

        Args:
            listener: Called with the new user (or None) after each change

        Returns:
            Callable[[], None]: Removes the listener when called
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self._user)
