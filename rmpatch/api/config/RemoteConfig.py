"""Remote device connection configuration."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RemoteConfig(BaseModel):
    """How to reach the device and control its service."""

    model_config = ConfigDict(extra="forbid")

    host: str = Field("10.11.99.1", description="Device address (USB network default)")
    user: str = Field("root", description="SSH login user")
    port: int = Field(22, gt=0, lt=65536, description="SSH port")
    connect_timeout: int = Field(10, gt=0, description="SSH connect timeout in seconds")
    command_timeout: int = Field(300, gt=0, description="Timeout for a single remote operation in seconds")
    ssh_binary: str = Field("ssh", description="ssh executable")
    scp_binary: str = Field("scp", description="scp executable")
    ssh_options: list[str] = Field(default_factory=list, description="Extra ssh arguments")
    scp_options: list[str] = Field(
        default_factory=list, description="Extra scp arguments (e.g. '-O' for devices without sftp-server)"
    )
    verify_method: Literal["remote", "pull"] = Field(
        "remote", description="Verify the installed binary with a remote digest command or by pulling it back"
    )
    temp_suffix: str = Field(".rmpatch-tmp", description="Suffix of the temporary remote upload path")
    stop_command: str = Field("systemctl stop {service}", description="Remote command stopping the service")
    restart_command: str = Field("systemctl restart {service}", description="Remote command restarting the service")

    @field_validator("host", "user", "ssh_binary", "scp_binary", "temp_suffix")
    @classmethod
    def validate_not_empty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("must be a non-empty string")
        return v.strip()

    @field_validator("stop_command", "restart_command")
    @classmethod
    def validate_service_placeholder(cls, v: str) -> str:
        if "{service}" not in v:
            raise ValueError(f"service command must contain the '{{service}}' placeholder, got: {v!r}")
        return v
