"""
Fixtures for page tests driven through NiceGUI's simulated user.
"""

import pytest
from nicegui.testing import User

from shambago.config import settings


@pytest.fixture(autouse=True)
def fast_replies(monkeypatch):
    monkeypatch.setattr(settings, "CHAT_REPLY_DELAY_SECONDS", 0.05)
    monkeypatch.setattr(settings, "SCAN_DELAY_SECONDS", 0.05)


@pytest.fixture
def drop_connection():
    """Run the handlers NiceGUI fires when a browser socket drops briefly."""

    def drop(user: User) -> None:
        for handler in list(user.client.disconnect_handlers):
            user.client.safe_invoke(handler)

    return drop


@pytest.fixture
def signed_up_user(user: User):
    async def sign_up(name: str = "Amina", email: str = "amina@example.com"):
        await user.open("/signup")
        user.find(marker="name").type(name)
        user.find(marker="email").type(email)
        user.find(marker="password").type("Mahindi#2024")
        user.find(marker="confirm-password").type("Mahindi#2024")
        user.find(marker="sign-up").click()
        await user.should_see(marker="shell-tabs")
        return user

    return sign_up
