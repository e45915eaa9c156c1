"""Schemas describing the remote host's platform."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class RemotePlatform(str, Enum):
    DARWIN = "darwin"
    LINUX_LIKE = "linux"

    @classmethod
    def from_os(cls, os_name: str) -> "RemotePlatform":
        """Only an exact ``darwin`` selects macOS tooling; anything else is Linux-like."""
        if os_name == cls.DARWIN.value:
            return cls.DARWIN
        return cls.LINUX_LIKE


class PlatformInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    os: str             # lowercased kernel name, e.g. "darwin", "linux", "freebsd"
    arch: str | None = None

    @property
    def platform(self) -> RemotePlatform:
        return RemotePlatform.from_os(self.os)
