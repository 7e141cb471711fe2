# core/auth.py
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional

import streamlit as st

from . import config
from .utils import initials

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuthUser:
    id: str
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None

    @property
    def display_name(self) -> str:
        name = f"{self.first_name or ''} {self.last_name or ''}".strip()
        return name or "User"

    @property
    def initials(self) -> str:
        return initials(self.display_name)


def user_from_claims(claims: Mapping[str, Any] | None) -> AuthUser | None:
    """
    Map identity-provider claims to an AuthUser.
    Returns None when the claims say the session is not signed in.
    """
    if not claims:
        return None
    if "is_logged_in" in claims and not claims.get("is_logged_in"):
        return None
    uid = str(claims.get("sub") or claims.get("id") or "").strip()
    email = str(claims.get("email") or "").strip()
    if not uid and not email:
        return None
    return AuthUser(
        id=uid or email,
        email=email,
        first_name=(claims.get("given_name") or claims.get("first_name") or None),
        last_name=(claims.get("family_name") or claims.get("last_name") or None),
    )


def dev_user() -> AuthUser | None:
    if not config.DEV_USER_EMAIL:
        return None
    return AuthUser(
        id=config.DEV_USER_ID or config.DEV_USER_EMAIL,
        email=config.DEV_USER_EMAIL,
        first_name=config.DEV_USER_FIRST_NAME or None,
        last_name=config.DEV_USER_LAST_NAME or None,
    )


def current_user() -> AuthUser | None:
    """The signed-in user, from the dev override or Streamlit's OIDC session."""
    u = dev_user()
    if u is not None:
        return u
    try:
        claims = st.user.to_dict()
    except Exception:
        logger.exception("Could not read identity from st.user")
        return None
    return user_from_claims(claims)


def sign_in() -> None:
    st.login()


def sign_out() -> None:
    if dev_user() is None:
        st.logout()
