"""
Session manager.

Single authority for who is signed in. Owns the current user record,
keeps it in step with the local store and tells listeners (the UI
shell) whenever the session changes.

NOTE: sign in matches on email only. The stored record carries no
credential, so the password is checked for presence and nothing else.
"""

from typing import Callable, List, Optional

from shambago.auth_service.repository import KeyValueStore, UserRepository
from shambago.auth_service.schemas import AuthOutcome, AuthResult, User
from shambago.common.logger import get_logger

logger = get_logger(__name__)

SessionListener = Callable[["SessionManager"], None]


class SessionManager:
    """
    Explicitly constructed session state.

    Lifecycle: construct with a store, ``load()`` once at start up,
    ``teardown()`` when the owning app shuts down.
    """

    def __init__(self, store: KeyValueStore, key: Optional[str] = None):
        self.repository = UserRepository(store, key=key)
        self.current_user: Optional[User] = None
        self._listeners: List[SessionListener] = []

    @property
    def is_authenticated(self) -> bool:
        return self.current_user is not None and self.current_user.authenticated

    # -------------------------------------------------
    # Lifecycle
    # -------------------------------------------------
    def load(self) -> None:
        """
        Restore the session from the store.

        A missing or unreadable record leaves the session signed out.
        """
        self.current_user = self.repository.load()

        logger.info(
            "Session loaded",
            extra={"authenticated": self.is_authenticated},
        )
        self._notify()

    def teardown(self) -> None:
        """Detach all listeners."""
        self._listeners.clear()
        logger.debug("Session manager torn down")

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        """
        Register a listener called after every session change.

        Returns:
            Callable[[], None]: Function that removes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # -------------------------------------------------
    # Operations
    # -------------------------------------------------
    def sign_in(self, email: str, password: str) -> AuthResult:
        """
        Sign in against the stored record.

        Args:
            email: Email entered by the user.
            password: Password entered by the user (presence only).

        Returns:
            AuthResult: Success, or the reason sign in was refused.
        """
        if not email:
            return AuthResult.of(AuthOutcome.MISSING_EMAIL)

        if not password:
            return AuthResult.of(AuthOutcome.MISSING_PASSWORD)

        saved = self.repository.load()

        if saved is None:
            logger.info("Sign in refused: no stored account")
            return AuthResult.of(AuthOutcome.NO_ACCOUNT)

        if saved.email != email:
            logger.info("Sign in refused: email mismatch")
            return AuthResult.of(AuthOutcome.INVALID_CREDENTIALS)

        self._store_user(saved.model_copy(update={"authenticated": True}))

        logger.info("User signed in", extra={"email": email})
        return AuthResult.of(AuthOutcome.SUCCESS)

    def sign_up(
        self,
        email: str,
        display_name: str,
        password: str,
        confirm_password: str,
    ) -> AuthResult:
        """
        Create the local account and sign it in.

        Any previously stored account is replaced.
        """
        if not email:
            return AuthResult.of(AuthOutcome.MISSING_EMAIL)

        if not password:
            return AuthResult.of(AuthOutcome.MISSING_PASSWORD)

        if not display_name:
            return AuthResult.of(AuthOutcome.MISSING_NAME)

        if password != confirm_password:
            return AuthResult.of(AuthOutcome.PASSWORD_MISMATCH)

        user = User(email=email, display_name=display_name, authenticated=True)
        self._store_user(user)

        logger.info("User signed up", extra={"email": email})
        return AuthResult.of(AuthOutcome.SUCCESS)

    def sign_out(self) -> None:
        """
        Delete the stored record and clear the session.

        Safe to call when already signed out.
        """
        removed = self.repository.delete()
        was_signed_in = self.current_user is not None
        self.current_user = None

        if removed or was_signed_in:
            logger.info("User signed out")
            self._notify()

    # -------------------------------------------------
    # Internals
    # -------------------------------------------------
    def _store_user(self, user: User) -> None:
        # Write first: a failing store must leave memory untouched
        self.repository.save(user)
        self.current_user = user
        self._notify()

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)
