"""Unit tests for the signed admin session cookie."""

from datetime import datetime, timedelta, timezone

from api.auth_admin import authenticate_admin, create_signed_cookie, verify_signed_cookie
from app.config import ADMIN_PASSWORD, ADMIN_USERNAME, SESSION_DURATION_HOURS


def test_fresh_cookie_is_valid():
    assert verify_signed_cookie(create_signed_cookie())


def test_expired_cookie_is_rejected():
    issued = datetime.now(timezone.utc) - timedelta(hours=SESSION_DURATION_HOURS + 1)
    assert not verify_signed_cookie(create_signed_cookie(now=issued))


def test_tampered_cookie_is_rejected():
    payload, signature = create_signed_cookie().split(".")
    forged_payload = payload[:-1] + ("A" if payload[-1] != "A" else "B")
    assert not verify_signed_cookie(f"{forged_payload}.{signature}")
    assert not verify_signed_cookie(f"{payload}.not-a-signature")


def test_malformed_cookies():
    assert not verify_signed_cookie("")
    assert not verify_signed_cookie(None)
    assert not verify_signed_cookie("no-dot")
    assert not verify_signed_cookie("a.b.c")


def test_authenticate_admin():
    assert authenticate_admin(ADMIN_USERNAME, ADMIN_PASSWORD)
    assert not authenticate_admin(ADMIN_USERNAME, ADMIN_PASSWORD + "x")
    assert not authenticate_admin("someone-else", ADMIN_PASSWORD)
