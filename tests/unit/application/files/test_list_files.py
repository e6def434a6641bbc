import pytest

from podium.backend.app.application.files import ListFilesInputDTO, UploadFileInputDTO
from podium.backend.app.application.files.use_cases import ListFilesUseCase, UploadFileUseCase
from podium.backend.app.domain.auth import FileAccessForbidden, NotAuthenticated
from podium.backend.app.domain.files import UnsupportedFileType
from tests.unit.fakes.file_storage import FakeFileStorage

pytestmark = pytest.mark.asyncio


@pytest.fixture
def storage() -> FakeFileStorage:
    return FakeFileStorage()


@pytest.fixture
def use_case(storage) -> ListFilesUseCase:
    return ListFilesUseCase(storage)


async def _upload(storage, user_id, file_type, filename="f.mp3"):
    await UploadFileUseCase(storage).execute(
        UploadFileInputDTO(
            filename=filename,
            content=b"x",
            content_type="audio/mpeg",
            file_type=file_type,
            user_id=user_id,
        )
    )


class TestListFilesUseCase:
    async def test_other_users_files_are_forbidden(self, use_case):
        with pytest.raises(FileAccessForbidden):
            await use_case.execute(ListFilesInputDTO(requested_user_id="U", authenticated_user_id="V"))

    async def test_anonymous_caller_cannot_list_user_files(self, use_case):
        with pytest.raises(NotAuthenticated):
            await use_case.execute(ListFilesInputDTO(requested_user_id="U", authenticated_user_id=None))

    async def test_owner_lists_own_files(self, use_case, storage):
        await _upload(storage, "U", "audio")
        await _upload(storage, "U", "image", filename="c.png")
        await _upload(storage, "V", "audio")

        files = await use_case.execute(
            ListFilesInputDTO(requested_user_id="U", authenticated_user_id="U", file_type="audio")
        )

        assert storage.last_list_kwargs["directory"] == "users/U/audio"
        assert [f.url for f in files] == ["/uploads/users/U/audio/file-1.mp3"]

    async def test_public_listing_skips_user_tree(self, use_case, storage):
        await _upload(storage, None, "audio")
        await _upload(storage, "U", "audio")

        files = await use_case.execute(ListFilesInputDTO(requested_user_id=None, authenticated_user_id=None))

        assert storage.last_list_kwargs["exclude"] == ("users",)
        assert [f.url for f in files] == ["/uploads/audio/file-1.mp3"]

    async def test_unknown_file_type_filter_is_rejected(self, use_case):
        with pytest.raises(UnsupportedFileType):
            await use_case.execute(
                ListFilesInputDTO(requested_user_id=None, authenticated_user_id=None, file_type="../etc")
            )

    async def test_public_misc_listing_returns_root_uploads_only(self, use_case, storage):
        await _upload(storage, None, "", filename="notes.txt")
        await _upload(storage, None, "audio")
        await _upload(storage, "U", "")

        files = await use_case.execute(
            ListFilesInputDTO(requested_user_id=None, authenticated_user_id=None, file_type="misc")
        )

        assert storage.last_list_kwargs["directory"] == ""
        assert storage.last_list_kwargs["recursive"] is False
        assert [f.url for f in files] == ["/uploads/file-1.txt"]
