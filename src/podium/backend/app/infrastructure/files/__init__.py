from podium.backend.app.infrastructure.files.filesystem_storage import FilesystemFileStorage

__all__ = ['FilesystemFileStorage']
