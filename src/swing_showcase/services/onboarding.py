"""Onboarding wizard state machine.

The wizard walks a user through a fixed sequence of steps, persisting partial
answers in local storage after every change. Forward and backward movement is
unconditional and clamped to the step range; only :meth:`advance` applies the
per-step checks. Completion creates the remote profile and is the only step
that talks to the network.
"""

import logging
from dataclasses import dataclass

from swing_showcase.adapters.profile_api_client import ProfileApiClient
from swing_showcase.domain.errors import ValidationFailedError
from swing_showcase.domain.onboarding import OnboardingState
from swing_showcase.services.local_store import LocalStore

_logger = logging.getLogger(__name__)

DEFAULT_COUNTRY = "United States"
DEFAULT_PAID_VOTER_MESSAGE = "Thank you for your support!"
DEFAULT_FREE_VOTER_MESSAGE = "Thank you for voting!"


class OnboardingValidationError(ValidationFailedError):
    """The current step is missing required answers."""

    code = "ONBOARDING_INCOMPLETE"


def data_key(user_id: str) -> str:
    return f"onboarding_{user_id}"


def complete_key(user_id: str) -> str:
    return f"onboarding_{user_id}_complete"


def skipped_key(user_id: str) -> str:
    return f"onboarding_{user_id}_skipped"


@dataclass
class OnboardingSequencer:
    """Drives one user's onboarding state."""

    state: OnboardingState
    store: LocalStore
    profile_client: ProfileApiClient

    @classmethod
    def for_user(
        cls, user_id: str, store: LocalStore, profile_client: ProfileApiClient
    ) -> "OnboardingSequencer":
        return cls(
            state=OnboardingState(user_id=user_id),
            store=store,
            profile_client=profile_client,
        )

    @property
    def user_id(self) -> str:
        return self.state.user_id

    async def initialize(self) -> None:
        """Skip the wizard for users with a profile, otherwise restore answers."""
        if await self.has_remote_profile():
            self.state.is_complete = True
            return
        saved = self.store.read_json(data_key(self.user_id))
        if isinstance(saved, dict):
            self.state.data = saved

    async def has_remote_profile(self) -> bool:
        """Return True when the profile API already knows this user."""
        try:
            return await self.profile_client.get_profile(self.user_id) is not None
        except Exception:
            _logger.exception("Error checking user profile: user_id=%s", self.user_id)
            return False

    def next_step(self) -> None:
        if self.state.current_step_index < self.state.total_steps - 1:
            self.state.current_step_index += 1

    def prev_step(self) -> None:
        if self.state.current_step_index > 0:
            self.state.current_step_index -= 1

    def go_to_step(self, index: int) -> None:
        if 0 <= index < self.state.total_steps:
            self.state.current_step_index = index

    def update_data(self, partial: dict[str, object]) -> None:
        """Shallow-merge answers and persist them; last writer wins."""
        self.state.data = {**self.state.data, **partial}
        self.store.write_json(data_key(self.user_id), self.state.data)

    def complete_step(self, step_id: str) -> None:
        self.state.completed_step_ids.add(step_id)

    def validate_current_step(self) -> None:
        """Raise OnboardingValidationError when the step lacks answers."""
        step_id = self.state.current_step.id
        if step_id == "profile-setup":
            basic_info = _as_dict(self.state.data.get("basicInfo"))
            name = str(basic_info.get("name") or "").strip()
            bio = str(basic_info.get("bio") or "").strip()
            if not name or not bio:
                raise OnboardingValidationError("Name and bio are required")
        elif step_id == "preferences":
            preferences = _as_dict(self.state.data.get("preferences"))
            if not preferences.get("goals"):
                raise OnboardingValidationError("Select at least one goal")

    def advance(self) -> None:
        """Validate and complete the current step, then move forward."""
        self.validate_current_step()
        self.complete_step(self.state.current_step.id)
        self.next_step()

    def skip(self) -> None:
        """Mark onboarding complete without creating a profile."""
        self.state.is_complete = True
        self.store.write_flag(skipped_key(self.user_id))

    def build_profile_payload(self) -> dict[str, object]:
        """Assemble the profile creation request from the collected answers."""
        basic_info = _as_dict(self.state.data.get("basicInfo"))
        location = str(basic_info.get("location") or "")
        parts = location.split(",")
        city = parts[0].strip()
        country = parts[1].strip() if len(parts) > 1 else ""
        return {
            "userId": self.user_id,
            "bio": basic_info.get("bio", ""),
            "avatarUrl": self.state.data.get("profilePhoto"),
            "phone": None,
            "address": location,
            "city": city,
            "country": country or DEFAULT_COUNTRY,
            "postalCode": None,
            "dateOfBirth": basic_info.get("age", ""),
            "gender": "Not specified",
            "hobbiesAndPassions": basic_info.get("hobbies") or "",
            "paidVoterMessage": basic_info.get("paidVoterMessage")
            or DEFAULT_PAID_VOTER_MESSAGE,
            "freeVoterMessage": basic_info.get("freeVoterMessage")
            or DEFAULT_FREE_VOTER_MESSAGE,
            "lastFreeVoteAt": None,
            "coverImageId": None,
        }

    async def complete(self) -> None:
        """Create the remote profile and mark onboarding complete.

        Any failure of the profile creation call propagates and leaves the
        state untouched. Portfolio and user-update failures are only logged.
        There is no retry and no idempotency key.
        """
        await self.profile_client.create_profile(self.build_profile_payload())

        for photo_url in self.state.data.get("portfolioPhotos") or []:
            try:
                await self.profile_client.add_portfolio_photo(
                    self.user_id, str(photo_url)
                )
            except Exception:
                _logger.warning("Failed to upload portfolio photo: %s", photo_url)

        basic_info = _as_dict(self.state.data.get("basicInfo"))
        try:
            await self.profile_client.update_user(
                self.user_id,
                {"name": basic_info.get("name", ""), "isOnboarded": True},
            )
        except Exception:
            _logger.warning("Failed to update user after onboarding: %s", self.user_id)

        self.state.is_complete = True
        self.store.write_flag(complete_key(self.user_id))
        self.store.remove(data_key(self.user_id))
        _logger.info("Onboarding completed: user_id=%s", self.user_id)

    async def close(self) -> None:
        """Release the profile API client."""
        await self.profile_client.close()


def _as_dict(value: object) -> dict[str, object]:
    return value if isinstance(value, dict) else {}
