from datetime import timedelta

import pytest

from podium.backend.app.application.auth import CreateSessionInputDTO
from podium.backend.app.application.auth.use_cases import CreateSessionUseCase
from podium.backend.app.domain.auth import MissingIdToken, SessionCreationError
from tests.unit.fakes.identity import FakeIdentityProvider, id_token_for

pytestmark = pytest.mark.asyncio

FOURTEEN_DAYS = timedelta(days=14)


async def test_exchanges_id_token_for_cookie():
    provider = FakeIdentityProvider()
    use_case = CreateSessionUseCase(provider, FOURTEEN_DAYS)

    cookie = await use_case.execute(CreateSessionInputDTO(id_token=id_token_for("U")))

    assert cookie.value == "session:U"
    assert cookie.max_age == FOURTEEN_DAYS
    assert provider.issued == [("session:U", FOURTEEN_DAYS)]


@pytest.mark.parametrize("token", [None, ""])
async def test_missing_token_is_rejected(token):
    provider = FakeIdentityProvider()

    with pytest.raises(MissingIdToken):
        await CreateSessionUseCase(provider, FOURTEEN_DAYS).execute(CreateSessionInputDTO(id_token=token))

    assert provider.issued == []


async def test_provider_rejection_propagates():
    use_case = CreateSessionUseCase(FakeIdentityProvider(), FOURTEEN_DAYS)

    with pytest.raises(SessionCreationError):
        await use_case.execute(CreateSessionInputDTO(id_token="forged"))
