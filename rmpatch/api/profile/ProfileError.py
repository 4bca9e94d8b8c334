"""Patch profile error."""


class ProfileError(Exception):
    """Raised when a patch profile is unknown, duplicated or unusable."""

    def __init__(self, errors: list[str]):
        if isinstance(errors, str):
            errors = [errors]
        self.errors = errors
        message = "Patch profile error:\n" + "\n".join(f"  - {e}" for e in errors)
        super().__init__(message)
