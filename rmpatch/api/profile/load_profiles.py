"""Merge built-in profiles with user profiles from the config file."""

from collections.abc import Iterable

from .load_builtin_profiles import load_builtin_profiles
from .PatchProfile import PatchProfile
from .ProfileError import ProfileError


def load_profiles(user_profiles: Iterable[PatchProfile] = ()) -> dict[str, PatchProfile]:
    """Return all known profiles keyed by name.

    Raises:
        ProfileError: If a user profile reuses a built-in or another user profile's name
    """
    profiles = load_builtin_profiles()
    builtin_names = set(profiles)
    errors: list[str] = []
    for profile in user_profiles:
        if profile.name in builtin_names:
            errors.append(f"profile {profile.name!r} shadows a built-in profile")
            continue
        if profile.name in profiles:
            errors.append(f"profile {profile.name!r} is defined more than once")
            continue
        profiles[profile.name] = profile
    if errors:
        raise ProfileError(errors)
    return profiles
