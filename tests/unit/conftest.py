"""
Shared fixtures for the callable handler tests.

The handlers only read ``data`` and ``auth`` from the callable request, so
requests are built as plain namespaces instead of going through the
callable HTTP transport.
"""
from types import SimpleNamespace
from unittest import mock

import pytest


@pytest.fixture
def make_request():
    def _make_request(data=None, uid=None, claims=None):
        auth = None
        if uid is not None:
            auth = SimpleNamespace(uid=uid, token=dict(claims or {}))
        return SimpleNamespace(data=data, auth=auth)

    return _make_request


@pytest.fixture
def admin_request(make_request):
    def _admin_request(data):
        return make_request(data, uid="admin-uid", claims={"usertype": "admin"})

    return _admin_request


@pytest.fixture
def set_claims():
    """Patch the Firebase Auth claim writer used by the role handler."""
    with mock.patch("roles.set_admin_role.auth") as mock_auth:
        yield mock_auth.set_custom_user_claims


@pytest.fixture
def smtp_env(monkeypatch):
    monkeypatch.setenv("SMTP_HOST", "smtp.example.com")
    monkeypatch.setenv("SMTP_PORT", "465")
    monkeypatch.setenv("SMTP_SECURITY", "ssl")
    monkeypatch.setenv("SMTP_USERNAME", "relay@example.com")
    monkeypatch.setenv("SMTP_PASSWORD", "relay-password")
    monkeypatch.delenv("OTP_SENDER", raising=False)


@pytest.fixture
def smtplib_mock(smtp_env):
    """Patch smtplib in the mail utilities; both connection types enter as themselves."""
    with mock.patch("utils.mail_utils.smtplib") as mock_smtplib:
        for connection in (mock_smtplib.SMTP_SSL.return_value, mock_smtplib.SMTP.return_value):
            connection.__enter__.return_value = connection
            connection.__exit__.return_value = False
        yield mock_smtplib
