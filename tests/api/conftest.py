import pyotp
import pytest
from fastapi.testclient import TestClient

from mfakit.application.config import MFAConfig
from mfakit.domain.entities import MFAPrincipal
from mfakit.main import create_app
from mfakit.infrastructure.memory.token_store import InMemoryTokenStore
from tests.fakes import FakePrincipalDirectory, RecordingEmail, RecordingSms


@pytest.fixture()
def totp_secret() -> str:
    return pyotp.random_base32()


@pytest.fixture()
def app_and_deps(totp_secret):
    sms = RecordingSms()
    email = RecordingEmail()
    store = InMemoryTokenStore()
    directory = FakePrincipalDirectory(
        by_id={
            "42": MFAPrincipal(
                id=42, email="jeremy@example.com", phone="+1234567890"
            ),
            "7": MFAPrincipal(
                id=7, email="totp@example.com", mfa_secret=totp_secret
            ),
        }
    )
    config = MFAConfig(
        sms_provider=sms,
        email_provider=email,
        token_store=store,
        totp_issuer="TestApp",
    )
    app = create_app(config=config, principal_directory=directory)

    try:
        yield app, {"sms": sms, "email": email, "store": store}
    finally:
        app.dependency_overrides.clear()


@pytest.fixture()
def client(app_and_deps):
    app, _ = app_and_deps
    return TestClient(app, raise_server_exceptions=False)
