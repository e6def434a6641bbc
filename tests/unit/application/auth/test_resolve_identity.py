import pytest

from podium.backend.app.application.auth.use_cases import ResolveIdentityUseCase
from tests.unit.fakes.identity import FakeIdentityProvider, session_cookie_for

pytestmark = pytest.mark.asyncio


async def test_valid_cookie_resolves_uid():
    use_case = ResolveIdentityUseCase(FakeIdentityProvider())

    assert await use_case.execute(session_cookie_for("U")) == "U"


async def test_missing_cookie_is_anonymous():
    provider = FakeIdentityProvider()

    assert await ResolveIdentityUseCase(provider).execute(None) is None
    assert provider.verified == []


async def test_verification_failure_degrades_to_anonymous(caplog):
    use_case = ResolveIdentityUseCase(FakeIdentityProvider())

    assert await use_case.execute("garbage") is None
    assert "Session verification failed" in caplog.text
