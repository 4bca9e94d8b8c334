"""List patch profiles command."""

from collections.abc import Iterator

from ..StageResult import StageResult
from .._output_schemas.profile import ProfileListOutput
from ..config.RMPatchConfig import RMPatchConfig
from .load_profiles import load_profiles
from .ProfileError import ProfileError


def cmd_list() -> StageResult:
    """List built-in and user defined patch profiles."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.3, "Loading configuration...")
        try:
            config = RMPatchConfig.load()
            yield (0.6, "Loading profiles...")
            profiles = load_profiles(config.profiles)
        except (ValueError, ProfileError) as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error loading profiles: {e}"
            result_obj.output = ProfileListOutput(
                errors=[str(e)], warnings=[], active="", profiles=[]
            ).model_dump(mode="python")
            result_obj.success = False
            return

        warnings: list[str] = []
        if config.profile not in profiles:
            warnings.append(f"active profile {config.profile!r} is not defined")

        yield (1.0, "Complete")
        result_obj.result = f"Found {len(profiles)} profile(s)"
        result_obj.output = ProfileListOutput(
            errors=[],
            warnings=warnings,
            active=config.profile,
            profiles=[profiles[name].summary() for name in sorted(profiles)],
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Listing patch profiles...",
        progress_callback=do_work,
    )
