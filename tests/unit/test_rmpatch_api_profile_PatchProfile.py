"""Unit tests for PatchProfile and profile loading."""

import base64

import pytest
from pydantic import ValidationError

from rmpatch.api.profile import PatchProfile, ProfileError, get_profile, load_builtin_profiles, load_profiles

pytestmark = pytest.mark.profile

BUILTIN = "webui-invincibility-1.7.0.1"


def _profile_dict(test_profile: PatchProfile, **changes) -> dict:
    data = test_profile.model_dump(mode="python", exclude_none=True)
    data.update(changes)
    return data


class TestBuiltinProfile:
    def test_digest_constants(self):
        profile = load_builtin_profiles()[BUILTIN]
        assert profile.remote_path == "/usr/bin/xochitl"
        assert profile.service == "xochitl"
        assert profile.source.value == "acf9f41d63b47a94b22daea47d50777b"
        assert profile.patched.value == "b289b3e371f083c7d317108d8efde2de"
        assert profile.source.label == "source"
        assert profile.patched.label == "patched"

    def test_backup_hint_names_download(self):
        profile = load_builtin_profiles()[BUILTIN]
        assert profile.backup_name == "xochitl_BACKUP"
        assert "1.7.0.1" in profile.backup_hint
        assert profile.backup_hint.split()[-1].startswith("https://")

    def test_cache_returns_copies(self):
        first = load_builtin_profiles()
        first.pop(BUILTIN)
        assert BUILTIN in load_builtin_profiles()


class TestValidation:
    def test_requires_exactly_one_payload_source(self, test_profile):
        data = _profile_dict(test_profile, payload_path="/tmp/payload.bin")
        with pytest.raises(ValidationError, match="exactly one of payload_b64 or payload_path"):
            PatchProfile(**data)

        data = _profile_dict(test_profile)
        data.pop("payload_b64")
        with pytest.raises(ValidationError, match="exactly one of payload_b64 or payload_path"):
            PatchProfile(**data)

    def test_rejects_relative_remote_path(self, test_profile):
        with pytest.raises(ValidationError, match="absolute"):
            PatchProfile(**_profile_dict(test_profile, remote_path="usr/bin/xochitl"))

    def test_rejects_backup_name_with_directory(self, test_profile):
        with pytest.raises(ValidationError, match="plain file name"):
            PatchProfile(**_profile_dict(test_profile, backup_name="../xochitl"))

    def test_rejects_invalid_base64(self, test_profile):
        with pytest.raises(ValidationError, match="base64"):
            PatchProfile(**_profile_dict(test_profile, payload_b64="not base64!"))

    def test_rejects_bad_digest(self, test_profile):
        with pytest.raises(ValidationError, match="32 hex characters"):
            PatchProfile(**_profile_dict(test_profile, source_digest="abcd"))

    def test_rejects_identical_digests(self, test_profile):
        with pytest.raises(ValidationError, match="must differ"):
            PatchProfile(**_profile_dict(test_profile, patched_digest=test_profile.source_digest))

    def test_rejects_unknown_field(self, test_profile):
        with pytest.raises(ValidationError):
            PatchProfile(**_profile_dict(test_profile, checksum="x"))


class TestPayload:
    def test_payload_from_b64(self, test_profile, binaries):
        assert test_profile.payload_bytes() == binaries.payload
        assert test_profile.payload().output_length == len(binaries.patched)

    def test_payload_from_file(self, test_profile, binaries, tmp_path):
        path = tmp_path / "webui.bsdiff"
        path.write_bytes(binaries.payload)
        data = _profile_dict(test_profile, payload_path=str(path))
        data.pop("payload_b64")
        profile = PatchProfile(**data)
        assert profile.payload_bytes() == binaries.payload

    def test_missing_payload_file(self, test_profile, tmp_path):
        data = _profile_dict(test_profile, payload_path=str(tmp_path / "missing.bsdiff"))
        data.pop("payload_b64")
        with pytest.raises(OSError):
            PatchProfile(**data).payload_bytes()

    def test_malformed_payload(self, test_profile):
        profile = PatchProfile(
            **_profile_dict(test_profile, payload_b64=base64.b64encode(b"garbage").decode("ascii"))
        )
        with pytest.raises(ValueError, match="too short"):
            profile.payload()


class TestLoadProfiles:
    def test_merges_user_profiles(self, test_profile):
        profiles = load_profiles([test_profile])
        assert set(profiles) == {BUILTIN, test_profile.name}

    def test_rejects_shadowing_builtin(self, test_profile):
        shadow = PatchProfile(**_profile_dict(test_profile, name=BUILTIN))
        with pytest.raises(ProfileError, match="shadows a built-in profile") as exc:
            load_profiles([shadow])
        assert len(exc.value.errors) == 1

    def test_rejects_duplicates(self, test_profile):
        with pytest.raises(ProfileError, match="defined more than once"):
            load_profiles([test_profile, test_profile])

    def test_get_profile(self, test_profile):
        assert get_profile(test_profile.name, [test_profile]) == test_profile
        assert get_profile(BUILTIN).name == BUILTIN

    def test_get_unknown_profile(self):
        with pytest.raises(ProfileError, match="unknown profile 'nope'"):
            get_profile("nope")
