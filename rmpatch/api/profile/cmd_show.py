"""Show one patch profile command."""

from collections.abc import Iterator

from ..StageResult import StageResult
from .._output_schemas.profile import ProfileShowOutput
from ..config.RMPatchConfig import RMPatchConfig
from .get_profile import get_profile
from .ProfileError import ProfileError


def cmd_show(name: str) -> StageResult:
    """Show a profile and its parsed payload header."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.3, "Loading configuration...")
        try:
            config = RMPatchConfig.load()
            profile = get_profile(name, config.profiles)
        except (ValueError, ProfileError) as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error loading profile '{name}': {e}"
            result_obj.output = ProfileShowOutput(
                errors=[str(e)], warnings=[], name=name, profile={}, payload={}
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (0.7, "Parsing payload header...")
        errors: list[str] = []
        payload_info: dict = {}
        try:
            payload_info = profile.payload().describe()
        except (OSError, ValueError) as e:
            errors.append(f"payload unusable: {e}")

        yield (1.0, "Complete")
        result_obj.result = f"Profile '{name}'" if not errors else f"Profile '{name}' has an unusable payload"
        result_obj.output = ProfileShowOutput(
            errors=errors,
            warnings=[],
            name=name,
            profile=profile.model_dump(mode="python", exclude={"payload_b64"}),
            payload=payload_info,
        ).model_dump(mode="python")
        result_obj.success = not errors

    return StageResult(
        announce=f"Showing profile {name}...",
        progress_callback=do_work,
    )
