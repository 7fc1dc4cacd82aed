"""Domain models for the onboarding wizard."""

import copy
from dataclasses import dataclass, field


@dataclass(frozen=True)
class StepDescriptor:
    """A single page of the onboarding wizard."""

    id: str
    title: str
    description: str
    phase: int
    required: bool = True


ONBOARDING_STEPS: tuple[StepDescriptor, ...] = (
    StepDescriptor(
        id="welcome",
        title="Welcome to Swing Boudoir!",
        description="Let's get you set up for success",
        phase=1,
    ),
    StepDescriptor(
        id="profile-setup",
        title="Complete Your Profile",
        description="Tell us about yourself and upload your photos",
        phase=1,
    ),
    StepDescriptor(
        id="preferences",
        title="Your Preferences & Goals",
        description="Help us match you with the right opportunities",
        phase=1,
    ),
    StepDescriptor(
        id="tutorial",
        title="How It Works",
        description="Learn how competitions and voting work",
        phase=2,
    ),
    StepDescriptor(
        id="rules",
        title="Rules & Guidelines",
        description="Important information to keep you safe and successful",
        phase=2,
    ),
    StepDescriptor(
        id="first-competition",
        title="Your First Competition",
        description="Browse and register for your first competition",
        phase=3,
    ),
    StepDescriptor(
        id="dashboard-tour",
        title="Dashboard Tour",
        description="Learn how to navigate your dashboard",
        phase=3,
    ),
)

_INITIAL_DATA: dict[str, object] = {
    "basicInfo": {
        "name": "",
        "bio": "",
        "age": "",
        "location": "",
        "socialMedia": {},
    },
    "portfolioPhotos": [],
    "experienceLevel": "beginner",
    "preferences": {
        "competitionTypes": [],
        "goals": [],
        "availability": "flexible",
        "travelPreferences": "local",
    },
    "tutorialCompleted": False,
    "rulesAccepted": False,
}


def initial_onboarding_data() -> dict[str, object]:
    """Return a fresh copy of the empty answer set."""
    return copy.deepcopy(_INITIAL_DATA)


@dataclass
class OnboardingState:
    """Mutable wizard state owned by a single client session."""

    user_id: str
    steps: tuple[StepDescriptor, ...] = ONBOARDING_STEPS
    current_step_index: int = 0
    data: dict[str, object] = field(default_factory=initial_onboarding_data)
    completed_step_ids: set[str] = field(default_factory=set)
    is_complete: bool = False

    @property
    def total_steps(self) -> int:
        return len(self.steps)

    @property
    def current_step(self) -> StepDescriptor:
        return self.steps[self.current_step_index]
