"""Domain exceptions carrying an HTTP status and a machine-readable code."""


class ShowcaseError(Exception):
    """Base exception for errors surfaced through the API envelope."""

    status_code = 500
    code = "INTERNAL_ERROR"

    def __init__(
        self,
        message: str = "Internal server error",
        code: str | None = None,
        status_code: int | None = None,
    ) -> None:
        self.message = message
        if code is not None:
            self.code = code
        if status_code is not None:
            self.status_code = status_code
        super().__init__(message)


class ValidationFailedError(ShowcaseError):
    """Request payload failed a business rule."""

    status_code = 400
    code = "VALIDATION_ERROR"


class TokenRequiredError(ShowcaseError):
    """No bearer token was supplied."""

    status_code = 401
    code = "TOKEN_REQUIRED"

    def __init__(self) -> None:
        super().__init__("Access token required")


class TokenInvalidError(ShowcaseError):
    """The bearer token is malformed, forged or expired."""

    status_code = 403
    code = "TOKEN_INVALID"

    def __init__(self) -> None:
        super().__init__("Invalid or expired token")


class InvalidCredentialsError(ShowcaseError):
    status_code = 401
    code = "INVALID_CREDENTIALS"

    def __init__(self) -> None:
        super().__init__("Invalid email or password")


class GoogleAccountError(ShowcaseError):
    status_code = 401
    code = "GOOGLE_ACCOUNT"

    def __init__(self) -> None:
        super().__init__(
            "This account was created with Google. Please use Google login."
        )


class UserExistsError(ShowcaseError):
    status_code = 409
    code = "USER_EXISTS"

    def __init__(self) -> None:
        super().__init__("User with this email already exists")


class UserNotFoundError(ShowcaseError):
    status_code = 404
    code = "USER_NOT_FOUND"

    def __init__(self) -> None:
        super().__init__("User not found")


class ProfileNotFoundError(ShowcaseError):
    status_code = 404
    code = "PROFILE_NOT_FOUND"

    def __init__(self) -> None:
        super().__init__("Profile not found")


class CompetitionNotFoundError(ShowcaseError):
    status_code = 404
    code = "COMPETITION_NOT_FOUND"

    def __init__(self) -> None:
        super().__init__("Competition not found")


class AlreadyJoinedError(ShowcaseError):
    status_code = 400
    code = "ALREADY_JOINED"

    def __init__(self) -> None:
        super().__init__("Already joined this competition")


class AlreadyRegisteredError(ShowcaseError):
    """A model already holds an active registration for the competition."""

    status_code = 400
    code = "ALREADY_REGISTERED"

    def __init__(self) -> None:
        super().__init__("Already registered for this competition")


class UploadRejectedError(ShowcaseError):
    status_code = 400
    code = "UPLOAD_REJECTED"
