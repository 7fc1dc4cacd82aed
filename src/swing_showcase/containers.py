"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from datetime import timedelta
from pathlib import Path

from supabase import create_client

from swing_showcase.adapters.google_verifier import GoogleIdTokenVerifier
from swing_showcase.adapters.local_image_storage import LocalImageStorage
from swing_showcase.adapters.memory_repository import (
    InMemoryRepository,
    InMemoryUserRepository,
)
from swing_showcase.adapters.profile_api_client import HttpxProfileApiClient
from swing_showcase.adapters.supabase_competition_repository import (
    SupabaseCompetitionRepository,
)
from swing_showcase.adapters.supabase_notification_repository import (
    SupabaseNotificationRepository,
)
from swing_showcase.adapters.supabase_prize_repository import SupabasePrizeRepository
from swing_showcase.adapters.supabase_user_repository import SupabaseUserRepository
from swing_showcase.adapters.supabase_vote_repository import SupabaseVoteRepository
from swing_showcase.config import Settings
from swing_showcase.services.auth import TokenService
from swing_showcase.services.competitions import (
    CompetitionRepository,
    CompetitionService,
)
from swing_showcase.services.local_store import LocalStore
from swing_showcase.services.notifications import (
    NotificationRepository,
    NotificationService,
)
from swing_showcase.services.onboarding import OnboardingSequencer
from swing_showcase.services.prizes import PrizeRepository, PrizeService
from swing_showcase.services.profiles import PublicProfileService
from swing_showcase.services.support import SupportService
from swing_showcase.services.uploads import ImageUploadService
from swing_showcase.services.users import UserRepository, UserService
from swing_showcase.services.votes import VoteRepository, VoteService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    token_service: TokenService
    user_service: UserService
    competition_service: CompetitionService
    vote_service: VoteService
    notification_service: NotificationService
    prize_service: PrizeService
    profile_service: PublicProfileService
    upload_service: ImageUploadService
    support_service: SupportService
    close_resources: Callable[[], Awaitable[None]]


@dataclass(frozen=True)
class Repositories:
    users: UserRepository
    competitions: CompetitionRepository
    votes: VoteRepository
    notifications: NotificationRepository
    prizes: PrizeRepository


def build_repositories(settings: Settings) -> Repositories:
    """Create repositories for the configured storage backend."""
    if settings.storage_backend == "supabase":
        if not settings.supabase_url or not settings.supabase_service_key:
            raise ValueError("Supabase storage requires SUPABASE_URL and key")
        client = create_client(settings.supabase_url, settings.supabase_service_key)
        return Repositories(
            users=SupabaseUserRepository(client),
            competitions=SupabaseCompetitionRepository(client),
            votes=SupabaseVoteRepository(client),
            notifications=SupabaseNotificationRepository(client),
            prizes=SupabasePrizeRepository(client),
        )
    if settings.storage_backend != "memory":
        raise ValueError(f"Unknown storage backend: {settings.storage_backend}")
    return Repositories(
        users=InMemoryUserRepository(),
        competitions=InMemoryRepository(),
        votes=InMemoryRepository(),
        notifications=InMemoryRepository(),
        prizes=InMemoryRepository(),
    )


def build_container(
    settings: Settings | None = None, repositories: Repositories | None = None
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    repos = repositories or build_repositories(resolved_settings)
    token_service = TokenService(
        secret=resolved_settings.jwt_secret,
        algorithm=resolved_settings.jwt_algorithm,
        ttl=timedelta(hours=resolved_settings.token_ttl_hours),
    )
    notification_service = NotificationService(repos.notifications)
    user_service = UserService(
        repository=repos.users,
        token_service=token_service,
        google_verifier=GoogleIdTokenVerifier(resolved_settings.google_client_id),
    )
    competition_service = CompetitionService(
        repository=repos.competitions,
        notification_service=notification_service,
    )
    vote_service = VoteService(
        repository=repos.votes,
        notification_service=notification_service,
    )
    upload_service = ImageUploadService(
        storage=LocalImageStorage(Path(resolved_settings.upload_dir)),
        repository=InMemoryRepository(),
        max_bytes=resolved_settings.max_upload_bytes,
        max_files=resolved_settings.max_upload_files,
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=resolved_settings,
        token_service=token_service,
        user_service=user_service,
        competition_service=competition_service,
        vote_service=vote_service,
        notification_service=notification_service,
        prize_service=PrizeService(repos.prizes),
        profile_service=PublicProfileService(
            user_repository=repos.users,
            vote_service=vote_service,
            competition_service=competition_service,
        ),
        upload_service=upload_service,
        support_service=SupportService(),
        close_resources=close_resources,
    )


def build_onboarding_sequencer(
    settings: Settings, user_id: str, token: str, store: LocalStore
) -> OnboardingSequencer:
    """Create an onboarding sequencer talking to the configured profile API."""
    client = HttpxProfileApiClient.create(settings.profile_api_base_url, token)
    return OnboardingSequencer.for_user(user_id, store, client)
