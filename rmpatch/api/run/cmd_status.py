"""Status command - report which binary version the device runs."""

from collections.abc import Iterator

from ..StageResult import StageResult
from .._output_schemas.run import RunStatusOutput
from ..config.RMPatchConfig import RMPatchConfig
from ..profile.get_profile import get_profile
from ..profile.ProfileError import ProfileError
from ..remote.get_channel import get_channel
from ..remote.remote_digest import remote_digest
from .FailureReason import FailureReason


def cmd_status(target: str | None = None, profile: str | None = None) -> StageResult:
    """Compare the installed binary's digest with the profile's digests. Read-only."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Loading configuration...")
        try:
            config = RMPatchConfig.load()
            resolved = get_profile(profile or config.profile, config.profiles)
        except (ValueError, ProfileError) as e:
            yield (1.0, "Complete")
            result_obj.result = f"{FailureReason.CONFIG_ERROR.value}: {e}"
            result_obj.output = RunStatusOutput(
                errors=[str(e)],
                warnings=[],
                target=target or "",
                profile=profile or "",
                remote_path="",
                digest="",
                installed="",
            ).model_dump(mode="python")
            result_obj.success = False
            result_obj.exit_code = FailureReason.CONFIG_ERROR.exit_code
            return

        channel = get_channel(config.remote, host=target)
        yield (0.5, f"Computing digest of {resolved.remote_path} on {channel.target}...")
        digest, error = remote_digest(channel, config.remote, resolved.remote_path, resolved.algorithm)
        if digest is None:
            yield (1.0, "Complete")
            result_obj.result = f"{FailureReason.FETCH_ERROR.value}: Failed to query {channel.target}: {error}"
            result_obj.output = RunStatusOutput(
                errors=[error],
                warnings=[],
                target=channel.target,
                profile=resolved.name,
                remote_path=resolved.remote_path,
                digest="",
                installed="",
            ).model_dump(mode="python")
            result_obj.success = False
            result_obj.exit_code = FailureReason.FETCH_ERROR.exit_code
            return

        warnings: list[str] = []
        if resolved.source.matches(digest):
            installed = "source"
            result_obj.result = f"{resolved.remote_path} is the unpatched version for profile '{resolved.name}'"
        elif resolved.patched.matches(digest):
            installed = "patched"
            result_obj.result = f"{resolved.remote_path} is patched with profile '{resolved.name}'"
        else:
            installed = "unknown"
            result_obj.result = f"{resolved.remote_path} matches neither digest of profile '{resolved.name}'"
            warnings.append("installed binary is not compatible with this profile")

        yield (1.0, "Complete")
        result_obj.output = RunStatusOutput(
            errors=[],
            warnings=warnings,
            target=channel.target,
            profile=resolved.name,
            remote_path=resolved.remote_path,
            digest=digest,
            installed=installed,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce=f"Checking {target or 'the configured device'}...",
        progress_callback=do_work,
    )
