"""Profile module - versioned patch payloads and their digests."""

from .get_profile import get_profile
from .load_builtin_profiles import load_builtin_profiles
from .load_profiles import load_profiles
from .PatchProfile import PatchProfile
from .ProfileError import ProfileError

__all__ = [
    "PatchProfile",
    "ProfileError",
    "get_profile",
    "load_builtin_profiles",
    "load_profiles",
]
