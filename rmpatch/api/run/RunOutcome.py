"""Final result of an orchestration run."""

from dataclasses import dataclass, field

from .FailureReason import FailureReason
from .PatchState import PatchState
from .SessionMode import SessionMode


@dataclass
class RunOutcome:
    """Where the state machine stopped and what the operator must know."""

    mode: SessionMode
    state: PatchState
    history: list[PatchState] = field(default_factory=list)
    failure: FailureReason | None = None
    message: str = ""
    remediation: str = ""
    remote_written: bool = False
    backup_path: str = ""
    digests: dict[str, str] = field(default_factory=dict)

    @property
    def success(self) -> bool:
        return self.state is PatchState.DONE and self.failure is None

    @property
    def exit_code(self) -> int:
        if self.success:
            return 0
        return self.failure.exit_code if self.failure is not None else 1
