"""Load the patch profiles shipped with the package."""

import json
from importlib import resources

from .PatchProfile import PatchProfile

_BUILTIN_CACHE: dict[str, PatchProfile] | None = None


def load_builtin_profiles() -> dict[str, PatchProfile]:
    """Return built-in profiles keyed by name (cached)."""
    global _BUILTIN_CACHE
    if _BUILTIN_CACHE is None:
        profiles: dict[str, PatchProfile] = {}
        builtin_dir = resources.files("rmpatch.api.profile").joinpath("_builtin")
        for entry in sorted(builtin_dir.iterdir(), key=lambda e: e.name):
            if not entry.name.endswith(".json"):
                continue
            with entry.open("r", encoding="utf-8") as fh:
                profile = PatchProfile(**json.load(fh))
            profiles[profile.name] = profile
        _BUILTIN_CACHE = profiles
    return dict(_BUILTIN_CACHE)
