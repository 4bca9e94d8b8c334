"""Shared pytest configuration and fixtures for all tests."""

import base64
import hashlib
import json
import os
import shlex
import tempfile
from pathlib import Path

import bsdiff4
import pytest

# Module level loggers are created at import time; keep their log file out of ~/.rmpatch.
os.environ["RMPATCH_HOME"] = tempfile.mkdtemp(prefix="rmpatch-test-home-")

from rmpatch.api.config.RemoteConfig import RemoteConfig  # noqa: E402
from rmpatch.api.profile.PatchProfile import PatchProfile  # noqa: E402
from rmpatch.api.remote.ChannelResult import ChannelResult  # noqa: E402
from rmpatch.api.remote.RemoteChannel import RemoteChannel  # noqa: E402
from rmpatch.api.run.BackupStore import BackupStore  # noqa: E402
from rmpatch.api.run.PatchOrchestrator import PatchOrchestrator  # noqa: E402

REMOTE_PATH = "/usr/bin/xochitl"
TEST_PROFILE = "test-webui"


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast isolated tests")
    config.addinivalue_line("markers", "checksum: digest computation and verification")
    config.addinivalue_line("markers", "bspatch: BSDIFF40 payload handling")
    config.addinivalue_line("markers", "profile: patch profiles")
    config.addinivalue_line("markers", "config: configuration loading")
    config.addinivalue_line("markers", "remote: device channel and locking")
    config.addinivalue_line("markers", "run: patch and undo state machine")
    config.addinivalue_line("markers", "cli: command line interface")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


@pytest.fixture(autouse=True)
def rmpatch_home(tmp_path, tmp_path_factory, monkeypatch):
    """Isolated RMPATCH_HOME and working directory for every test."""
    home = tmp_path_factory.mktemp("home")
    monkeypatch.setenv("RMPATCH_HOME", str(home))
    monkeypatch.chdir(tmp_path)
    return home


@pytest.fixture
def run_cmd():
    """Execute a cmd function and return the result with progress_callback executed."""

    def _run(cmd_func, *args, **kwargs):
        result = cmd_func(*args, **kwargs)
        list(result.progress_callback(result))
        return result

    return _run


# =============================================================================
# Synthetic binaries
# =============================================================================


class Binaries:
    """Unpatched and patched test executables with the payload between them."""

    def __init__(self):
        self.source = b"\x7fELF\x01\x01\x01\x00" + b"".join(i.to_bytes(2, "little") for i in range(4096))
        patched = bytearray(self.source)
        patched[1024:1040] = b"WebInterface=on!"
        patched[5000:5004] = b"\x90\x90\x90\x90"
        self.patched = bytes(patched)
        self.payload = bsdiff4.diff(self.source, self.patched)

    @staticmethod
    def md5(data: bytes) -> str:
        return hashlib.md5(data).hexdigest()


@pytest.fixture(scope="session")
def binaries() -> Binaries:
    return Binaries()


@pytest.fixture
def test_profile(binaries) -> PatchProfile:
    """Profile bound to the synthetic binaries."""
    return PatchProfile(
        name=TEST_PROFILE,
        description="Synthetic profile for tests",
        remote_path=REMOTE_PATH,
        service="xochitl",
        source_digest=binaries.md5(binaries.source),
        patched_digest=binaries.md5(binaries.patched),
        payload_b64=base64.b64encode(binaries.payload).decode("ascii"),
        backup_name="xochitl_BACKUP",
        backup_hint="Ask the test vault for a backup",
        disclaimer="Synthetic disclaimer",
    )


@pytest.fixture
def write_config(rmpatch_home):
    """Write ``config.json`` into the isolated RMPATCH_HOME."""

    def _write(data: dict) -> Path:
        path = rmpatch_home / "config.json"
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def rmpatch_config(write_config, test_profile, tmp_path) -> dict:
    """Config selecting the test profile with backups under ``tmp_path/backups``."""
    data = {
        "backup": {"directory": str(tmp_path / "backups")},
        "profile": TEST_PROFILE,
        "profiles": [test_profile.model_dump(mode="python", exclude_none=True)],
    }
    write_config(data)
    return data


# =============================================================================
# Fake device
# =============================================================================


class FakeChannel(RemoteChannel):
    """In-memory device that records every call.

    Remote files live in ``files``. ``fail(prefix)`` makes every call whose
    description starts with ``prefix`` fail; descriptions are ``pull PATH``,
    ``push PATH`` or the exec'd command line.
    """

    def __init__(self, files: dict[str, bytes] | None = None, target: str = "10.11.99.1"):
        self._target = target
        self.files = dict(files or {})
        self.calls: list[str] = []
        self.pushes: list[tuple[str, bytes, int]] = []
        self.corrupt_pushes = False
        self._failures: dict[str, str] = {}

    @property
    def target(self) -> str:
        return self._target

    @property
    def execs(self) -> list[str]:
        return [c for c in self.calls if not c.startswith(("pull ", "push "))]

    @property
    def wrote(self) -> bool:
        """Whether the device's files were modified."""
        return bool(self.pushes) or any(c.startswith("mv ") for c in self.execs)

    def fail(self, prefix: str, error: str = "simulated failure") -> None:
        self._failures[prefix] = error

    def _failure(self, description: str) -> ChannelResult | None:
        self.calls.append(description)
        for prefix, error in self._failures.items():
            if description.startswith(prefix):
                return ChannelResult.failure(error, exit_status=1)
        return None

    def pull(self, remote_path: str) -> ChannelResult:
        failed = self._failure(f"pull {remote_path}")
        if failed:
            return failed
        if remote_path not in self.files:
            return ChannelResult.failure(f"scp: {remote_path}: No such file or directory", exit_status=1)
        return ChannelResult(success=True, data=self.files[remote_path])

    def push(self, data: bytes, remote_path: str, mode: int = 0o755) -> ChannelResult:
        failed = self._failure(f"push {remote_path}")
        if failed:
            return failed
        if self.corrupt_pushes:
            data = data[:-1] + bytes([data[-1] ^ 0xFF])
        self.pushes.append((remote_path, data, mode))
        self.files[remote_path] = data
        return ChannelResult(success=True)

    def exec(self, command: str) -> ChannelResult:
        failed = self._failure(command)
        if failed:
            return failed
        argv = shlex.split(command)
        if argv[:2] == ["mv", "-f"]:
            self.files[argv[3]] = self.files.pop(argv[2])
        elif argv[:2] == ["rm", "-f"]:
            self.files.pop(argv[2], None)
        elif argv[0] in ("md5sum", "sha256sum"):
            if argv[1] not in self.files:
                return ChannelResult.failure(f"{argv[0]}: {argv[1]}: No such file or directory", exit_status=1)
            digest = hashlib.new(argv[0][: -len("sum")], self.files[argv[1]]).hexdigest()
            return ChannelResult(success=True, output=f"{digest}  {argv[1]}\n")
        return ChannelResult(success=True)


@pytest.fixture
def make_fake_channel(binaries):
    """Build a device running the unpatched synthetic binary at ``target``."""

    def _make(target: str = "10.11.99.1") -> FakeChannel:
        return FakeChannel({REMOTE_PATH: binaries.source}, target=target)

    return _make


@pytest.fixture
def fake_channel(make_fake_channel) -> FakeChannel:
    """Device running the unpatched synthetic binary."""
    return make_fake_channel()


@pytest.fixture
def make_orchestrator(test_profile, tmp_path):
    """Build an orchestrator for ``channel`` with backups under ``tmp_path/backups``."""

    def _make(channel: RemoteChannel, profile: PatchProfile | None = None, **remote) -> PatchOrchestrator:
        return PatchOrchestrator(
            channel=channel,
            profile=profile or test_profile,
            remote_config=RemoteConfig(**remote),
            backup_store=BackupStore(tmp_path / "backups"),
        )

    return _make


@pytest.fixture
def use_fake_channel(monkeypatch, fake_channel):
    """Route every command's channel to ``fake_channel``."""
    import importlib

    for module_name in ("rmpatch.api.run._run_session", "rmpatch.api.run.cmd_status"):
        module = importlib.import_module(module_name)
        monkeypatch.setattr(module, "get_channel", lambda remote_config, host=None: fake_channel)
    return fake_channel
