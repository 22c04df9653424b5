"""Dependency container wiring for the application."""

from dataclasses import dataclass
from pathlib import Path

from national_connect.adapters.local_photo_storage import LocalPhotoStorage
from national_connect.adapters.memory_store import DirectoryStore
from national_connect.config import Settings
from national_connect.services.frequency import FrequencyService
from national_connect.services.ids import IdGenerator, MonotonicIdGenerator
from national_connect.services.messages import MessageService
from national_connect.services.photos import PhotoService, PhotoStorage
from national_connect.services.stats import StatsService
from national_connect.services.users import UserService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    store: DirectoryStore
    id_generator: IdGenerator
    photo_storage: PhotoStorage
    user_service: UserService
    frequency_service: FrequencyService
    photo_service: PhotoService
    message_service: MessageService
    stats_service: StatsService


def build_container(
    settings: Settings | None = None, id_generator: IdGenerator | None = None
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    ids = id_generator or MonotonicIdGenerator()
    store = DirectoryStore()
    photo_storage = LocalPhotoStorage(
        upload_dir=Path(resolved_settings.upload_dir),
        id_generator=ids,
        max_bytes=resolved_settings.max_upload_bytes,
    )
    return AppContainer(
        settings=resolved_settings,
        store=store,
        id_generator=ids,
        photo_storage=photo_storage,
        user_service=UserService(store.users, ids),
        frequency_service=FrequencyService(
            user_repository=store.users,
            connection_repository=store.connections,
            id_generator=ids,
        ),
        photo_service=PhotoService(
            photo_repository=store.photos,
            user_repository=store.users,
            id_generator=ids,
        ),
        message_service=MessageService(
            message_repository=store.messages,
            user_repository=store.users,
            id_generator=ids,
        ),
        stats_service=StatsService(
            user_repository=store.users,
            connection_repository=store.connections,
            photo_repository=store.photos,
            message_repository=store.messages,
        ),
    )
