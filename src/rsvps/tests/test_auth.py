import pytest

from src.rsvps.auth import AdminAuthGate
from src.rsvps.dtos import AdminCredential
from src.rsvps.errors import AuthError, ConfigError


def test_matching_credential_is_allowed():
    gate = AdminAuthGate("s3cret")

    assert gate.configured is True
    gate.authorize(AdminCredential("admin", "s3cret"))


@pytest.mark.parametrize(
    "credential",
    [
        AdminCredential("admin", "wrong"),
        AdminCredential("admin", "S3CRET"),
        AdminCredential("admin", "s3cret "),
        AdminCredential("root", "s3cret"),
        AdminCredential("admin", ""),
    ],
)
def test_other_credentials_are_denied(credential):
    gate = AdminAuthGate("s3cret")

    with pytest.raises(AuthError, match="Unauthorized."):
        gate.authorize(credential)


def test_missing_credential_is_denied():
    with pytest.raises(AuthError, match="Missing auth."):
        AdminAuthGate("s3cret").authorize(None)


@pytest.mark.parametrize("credential", [None, AdminCredential("admin", ""), AdminCredential("admin", "x")])
def test_unconfigured_secret_denies_everything(credential):
    gate = AdminAuthGate("")

    assert gate.configured is False
    with pytest.raises(ConfigError, match="ADMIN_PASSWORD not set on server."):
        gate.authorize(credential)


def test_username_is_configurable():
    gate = AdminAuthGate("s3cret", username="host")

    gate.authorize(AdminCredential("host", "s3cret"))
    with pytest.raises(AuthError):
        gate.authorize(AdminCredential("admin", "s3cret"))


def test_non_ascii_secret():
    gate = AdminAuthGate("pässwörd")

    gate.authorize(AdminCredential("admin", "pässwörd"))
    with pytest.raises(AuthError):
        gate.authorize(AdminCredential("admin", "passwort"))
