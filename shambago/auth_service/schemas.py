"""
Schemas for the local user session.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    """
    The single locally stored user record.

    Serialized with the field names ``email``, ``name`` and
    ``isAuthenticated``.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    email: str
    display_name: str = Field(alias="name")
    authenticated: bool = Field(default=False, alias="isAuthenticated")


class AuthOutcome(str, Enum):
    SUCCESS = "success"
    MISSING_EMAIL = "missing_email"
    MISSING_PASSWORD = "missing_password"
    MISSING_NAME = "missing_name"
    PASSWORD_MISMATCH = "password_mismatch"
    NO_ACCOUNT = "no_account"
    INVALID_CREDENTIALS = "invalid_credentials"


AUTH_MESSAGES = {
    AuthOutcome.SUCCESS: "Welcome to ShambaGo!",
    AuthOutcome.MISSING_EMAIL: "Please enter your email",
    AuthOutcome.MISSING_PASSWORD: "Please enter your password",
    AuthOutcome.MISSING_NAME: "Please enter your name",
    AuthOutcome.PASSWORD_MISMATCH: "Passwords do not match",
    AuthOutcome.NO_ACCOUNT: "No account found. Please sign up.",
    AuthOutcome.INVALID_CREDENTIALS: "Invalid email or password",
}


class AuthResult(BaseModel):
    """
    Result of a sign in or sign up attempt.

    Failures carry a user-facing message and never change the session.
    """

    outcome: AuthOutcome
    message: str

    @property
    def ok(self) -> bool:
        return self.outcome is AuthOutcome.SUCCESS

    @classmethod
    def of(cls, outcome: AuthOutcome) -> "AuthResult":
        return cls(outcome=outcome, message=AUTH_MESSAGES[outcome])
