"""Current-user session endpoints."""
from fastapi import APIRouter, Depends, status

from portal.api.deps import get_session_store
from portal.schemas.session import PortalUpdateRequest, SessionResponse
from portal.services.session import SessionStore, UserSession

router = APIRouter(prefix="/session", tags=["Session"])


@router.get("", response_model=SessionResponse, summary="Get the current user")
async def get_session(store: SessionStore = Depends(get_session_store)) -> SessionResponse:
    return SessionResponse(user=store.user)


@router.put(
    "",
    response_model=SessionResponse,
    summary="Sign in as a user",
    description="Replace the current user record. No credentials are checked.",
)
async def set_session(
    user: UserSession,
    store: SessionStore = Depends(get_session_store),
) -> SessionResponse:
    store.set_user(user)
    return SessionResponse(user=store.user)


@router.delete(
    "",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Sign out",
)
async def clear_session(store: SessionStore = Depends(get_session_store)) -> None:
    store.clear_user()


@router.patch(
    "/portal",
    response_model=SessionResponse,
    summary="Switch portal",
    description="Change the active portal of the current user; ignored when nobody is signed in.",
)
async def update_portal(
    body: PortalUpdateRequest,
    store: SessionStore = Depends(get_session_store),
) -> SessionResponse:
    store.set_portal(body.portal)
    return SessionResponse(user=store.user)
