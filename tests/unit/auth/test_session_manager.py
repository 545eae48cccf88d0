import json

import pytest

from shambago.auth_service.schemas import AuthOutcome
from shambago.auth_service.session_manager import SessionManager


def _stored_user(store):
    return json.loads(store["currentUser"])


def test_starts_signed_out_with_empty_store(session):
    assert session.is_authenticated is False
    assert session.current_user is None


def test_sign_up_authenticates_and_persists(session, store):
    result = session.sign_up("amina@shamba.ke", "Amina", "secret", "secret")

    assert result.ok
    assert session.is_authenticated is True
    assert session.current_user.email == "amina@shamba.ke"
    assert _stored_user(store) == {
        "email": "amina@shamba.ke",
        "name": "Amina",
        "isAuthenticated": True,
    }


@pytest.mark.parametrize(
    "email, name, password, confirm, outcome",
    [
        ("", "Amina", "pw", "pw", AuthOutcome.MISSING_EMAIL),
        ("a@b.c", "Amina", "", "", AuthOutcome.MISSING_PASSWORD),
        ("a@b.c", "", "pw", "pw", AuthOutcome.MISSING_NAME),
        ("a@b.c", "Amina", "pw", "other", AuthOutcome.PASSWORD_MISMATCH),
    ],
)
def test_sign_up_validation_leaves_state_unchanged(
    session, store, email, name, password, confirm, outcome
):
    result = session.sign_up(email, name, password, confirm)

    assert result.outcome is outcome
    assert not result.ok
    assert session.is_authenticated is False
    assert store == {}


def test_sign_up_messages_are_user_facing(session):
    result = session.sign_up("a@b.c", "Amina", "pw", "nope")
    assert result.message == "Passwords do not match"


def test_sign_up_overwrites_previous_account(session, store):
    session.sign_up("first@shamba.ke", "First", "pw", "pw")
    session.sign_up("second@shamba.ke", "Second", "pw", "pw")

    assert _stored_user(store)["email"] == "second@shamba.ke"


def test_sign_in_without_account(session):
    result = session.sign_in("amina@shamba.ke", "secret")

    assert result.outcome is AuthOutcome.NO_ACCOUNT
    assert result.message == "No account found. Please sign up."
    assert session.is_authenticated is False


def test_sign_in_with_different_email(session):
    session.sign_up("amina@shamba.ke", "Amina", "pw", "pw")
    session.sign_out()

    result = session.sign_in("juma@shamba.ke", "pw")

    assert result.outcome is AuthOutcome.INVALID_CREDENTIALS
    assert result.message == "Invalid email or password"
    assert session.is_authenticated is False


def test_sign_in_matches_email_only(store):
    store["currentUser"] = json.dumps(
        {"email": "amina@shamba.ke", "name": "Amina", "isAuthenticated": False}
    )
    manager = SessionManager(store)
    manager.load()

    assert manager.current_user is not None
    assert manager.is_authenticated is False

    result = manager.sign_in("amina@shamba.ke", "any password at all")

    assert result.ok
    assert manager.is_authenticated is True
    assert _stored_user(store)["isAuthenticated"] is True


def test_sign_in_requires_email_and_password(session):
    assert session.sign_in("", "pw").outcome is AuthOutcome.MISSING_EMAIL
    assert session.sign_in("a@b.c", "").outcome is AuthOutcome.MISSING_PASSWORD


def test_load_restores_persisted_session(session, store):
    session.sign_up("amina@shamba.ke", "Amina", "pw", "pw")

    restored = SessionManager(store)
    restored.load()

    assert restored.is_authenticated is True
    assert restored.current_user.display_name == "Amina"


@pytest.mark.parametrize(
    "raw",
    [
        "not json",
        "[]",
        json.dumps({"email": "a@b.c"}),
        json.dumps({"email": 5, "name": "x", "isAuthenticated": "maybe"}),
    ],
)
def test_load_ignores_unreadable_record(store, raw):
    store["currentUser"] = raw
    manager = SessionManager(store)

    manager.load()

    assert manager.is_authenticated is False
    assert manager.current_user is None


def test_sign_out_then_load_is_signed_out(session, store):
    session.sign_up("amina@shamba.ke", "Amina", "pw", "pw")

    session.sign_out()
    session.load()

    assert session.is_authenticated is False
    assert session.current_user is None
    assert "currentUser" not in store


def test_sign_out_is_idempotent(session, store):
    session.sign_up("amina@shamba.ke", "Amina", "pw", "pw")

    session.sign_out()
    once = (session.is_authenticated, session.current_user, dict(store))
    session.sign_out()

    assert (session.is_authenticated, session.current_user, dict(store)) == once


def test_listeners_notified_on_change(session):
    seen = []
    session.subscribe(lambda s: seen.append(s.is_authenticated))

    session.sign_up("amina@shamba.ke", "Amina", "pw", "pw")
    session.sign_out()
    session.sign_out()

    assert seen == [True, False]


def test_failed_validation_does_not_notify(session):
    seen = []
    session.subscribe(lambda s: seen.append(s))

    session.sign_in("amina@shamba.ke", "pw")

    assert seen == []


def test_unsubscribe_and_teardown_detach_listeners(session):
    seen = []
    unsubscribe = session.subscribe(lambda s: seen.append("a"))
    session.subscribe(lambda s: seen.append("b"))

    unsubscribe()
    session.sign_up("amina@shamba.ke", "Amina", "pw", "pw")
    session.teardown()
    session.sign_out()

    assert seen == ["b"]


def test_store_write_failure_keeps_memory_unchanged():
    class BrokenStore(dict):
        def __setitem__(self, key, value):
            raise OSError("disk full")

    manager = SessionManager(BrokenStore())
    manager.load()

    with pytest.raises(OSError):
        manager.sign_up("amina@shamba.ke", "Amina", "pw", "pw")

    assert manager.is_authenticated is False
    assert manager.current_user is None
