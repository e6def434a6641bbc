import pytest
from fastapi.testclient import TestClient

from podium.client import ApiError, PodiumApi
from tests.unit.fakes.identity import id_token_for


@pytest.fixture
def api(app) -> PodiumApi:
    return PodiumApi(client=TestClient(app, base_url="http://testserver/api"))


def test_session_round_trip_authenticates_uploads(api: PodiumApi):
    assert api.create_session(id_token_for("U")) is True

    uploaded = api.upload_file(
        file_name="take1.wav",
        file_bytes=b"RIFF....WAVE",
        content_type="audio/wav",
        file_type="audio",
        song_id="song-9",
    )

    assert uploaded["userId"] == "U"
    assert uploaded["songId"] == "song-9"
    assert "users/U/audio" in uploaded["url"]

    files = api.list_user_files("U", file_type="audio")
    assert [f["id"] for f in files] == [uploaded["id"]]


def test_cleared_session_can_no_longer_list_user_files(api: PodiumApi):
    api.create_session(id_token_for("U"))
    assert api.clear_session() is True

    with pytest.raises(ApiError) as exc_info:
        api.list_user_files("U")

    assert "401" in str(exc_info.value)
    assert "Unauthorized" in str(exc_info.value)


def test_rejected_id_token_surfaces_server_message(api: PodiumApi):
    with pytest.raises(ApiError) as exc_info:
        api.create_session("forged")

    assert "Failed to create session" in str(exc_info.value)


def test_public_files_listing(api: PodiumApi):
    uploaded = api.upload_file(file_name="cover.jpg", file_bytes=b"\xff\xd8", file_type="image")

    assert uploaded["userId"] is None
    assert [f["url"] for f in api.list_public_files("image")] == [uploaded["url"]]
