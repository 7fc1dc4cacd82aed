"""Google ID token verification adapter."""

from dataclasses import dataclass

from google.auth.transport import requests as google_requests
from google.oauth2 import id_token

from swing_showcase.services.auth import GoogleIdentity, GoogleTokenVerifier

_GOOGLE_ISSUERS = {"accounts.google.com", "https://accounts.google.com"}


@dataclass
class GoogleIdTokenVerifier(GoogleTokenVerifier):
    """Verifies ID tokens issued to our OAuth client id."""

    client_id: str | None

    def verify(self, token: str) -> GoogleIdentity:
        """Verify the token signature, audience and issuer."""
        if not self.client_id:
            raise ValueError("Google sign-in is not configured")
        info = id_token.verify_oauth2_token(
            token, google_requests.Request(), self.client_id
        )
        if info.get("iss") not in _GOOGLE_ISSUERS:
            raise ValueError("Invalid token issuer")
        return GoogleIdentity(
            google_id=str(info["sub"]),
            email=str(info.get("email", "")),
            name=str(info.get("name", "")),
            picture=info.get("picture"),
            email_verified=bool(info.get("email_verified", False)),
        )
