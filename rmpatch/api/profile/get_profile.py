"""Resolve the profile used for a run."""

from collections.abc import Iterable

from .load_profiles import load_profiles
from .PatchProfile import PatchProfile
from .ProfileError import ProfileError


def get_profile(name: str, user_profiles: Iterable[PatchProfile] = ()) -> PatchProfile:
    """Look up a profile by name.

    Raises:
        ProfileError: If the profile is unknown or profiles conflict
    """
    profiles = load_profiles(user_profiles)
    profile = profiles.get(name)
    if profile is None:
        raise ProfileError([f"unknown profile {name!r} (available: {sorted(profiles)})"])
    return profile
