import pytest

from mfakit.application.dispatch import NotifierDispatch
from mfakit.application.mfa_service import MFAService
from mfakit.application.token_manager import TokenManager
from mfakit.application.totp import TotpVerifier
from mfakit.domain.entities import MFAPrincipal
from mfakit.infrastructure.memory.token_store import InMemoryTokenStore
from tests.fakes import FakeClock, RecordingEmail, RecordingSms


@pytest.fixture()
def clock():
    return FakeClock()


@pytest.fixture()
def store(clock):
    return InMemoryTokenStore(clock=clock)


@pytest.fixture()
def token_manager(store):
    return TokenManager(store)


@pytest.fixture()
def sms():
    return RecordingSms()


@pytest.fixture()
def email():
    return RecordingEmail()


@pytest.fixture()
def mfa(token_manager, sms, email):
    return MFAService(
        token_manager=token_manager,
        totp=TotpVerifier(issuer="TestApp"),
        dispatch=NotifierDispatch(sms_provider=sms, email_provider=email),
    )


@pytest.fixture()
def principal():
    return MFAPrincipal(id=1, email="test@example.com", phone="+1234567890")


@pytest.fixture()
def fixed_code(monkeypatch):
    """
    Make issued codes deterministic.
    Override in a specific test by re-monkeypatching.
    """
    from mfakit.domain import services as domain_services

    monkeypatch.setattr(
        domain_services, "generate_numeric_code", lambda length: "483920"
    )
    yield "483920"
