"""Support desk: static FAQ and contact requests."""

import logging
from dataclasses import dataclass, field

_logger = logging.getLogger(__name__)

FAQS: tuple[dict[str, object], ...] = (
    {
        "id": 1,
        "question": "How do I join a competition?",
        "answer": (
            "Click on any active competition and press the 'Join' button to "
            "participate."
        ),
    },
    {
        "id": 2,
        "question": "How does voting work?",
        "answer": (
            "Users can vote for their favorite models. Premium votes carry more "
            "weight."
        ),
    },
    {
        "id": 3,
        "question": "When are prizes distributed?",
        "answer": "Prizes are distributed within 30 days after the competition ends.",
    },
)


@dataclass(frozen=True)
class ContactRequest:
    name: str
    email: str
    subject: str
    message: str


@dataclass
class SupportService:
    """Collects contact requests in memory for follow-up."""

    requests: list[ContactRequest] = field(default_factory=list)

    def faqs(self) -> list[dict[str, object]]:
        return [dict(faq) for faq in FAQS]

    def submit(self, request: ContactRequest) -> None:
        """Record a contact request."""
        self.requests.append(request)
        _logger.info(
            "Support request received: email=%s subject=%s",
            request.email,
            request.subject,
        )
