"""Schemas for listening ports discovered on a remote host."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, computed_field

from remoteports.schemas.platform import RemotePlatform

# Ports that local dev servers usually bind to
COMMON_DEV_PORTS: frozenset[int] = frozenset({3000, 3005, 8000, 8080, 5173, 4200, 5000, 9000})

# Substrings of process names that identify dev tooling
DEV_PROCESS_KEYWORDS: tuple[str, ...] = (
    "node", "python", "bun", "npm", "yarn", "vite", "next", "nuxt",
)

MIN_PORT = 1
MAX_PORT = 65535


class RemotePort(BaseModel):
    """One TCP endpoint in LISTEN state on the remote host."""

    model_config = ConfigDict(frozen=True)

    port: int = Field(ge=MIN_PORT, le=MAX_PORT)
    process: str | None = None
    address: str          # "127.0.0.1", "::1", "0.0.0.0" for wildcard binds

    @computed_field
    @property
    def sort_priority(self) -> int:
        """Ranking bucket, lower sorts first.

        0: common dev port, 1: dev tooling process, 2: everything else.
        """
        if self.port in COMMON_DEV_PORTS:
            return 0
        if self.process:
            name = self.process.lower()
            if any(keyword in name for keyword in DEV_PROCESS_KEYWORDS):
                return 1
        return 2

    @computed_field
    @property
    def display_name(self) -> str:
        if self.process:
            return f":{self.port} - {self.process}"
        return f":{self.port}"

    def sort_key(self) -> tuple[int, int]:
        return (self.sort_priority, self.port)


class PortScanResult(BaseModel):
    """Outcome of one discovery pass.

    ``status`` separates a host without any usable scanning tool from a host
    that simply has nothing listening; both carry an empty ``ports`` list.
    """

    platform: RemotePlatform
    status: Literal["ok", "tool_unavailable"] = "ok"
    ports: list[RemotePort] = Field(default_factory=list)

    @computed_field
    @property
    def tool_available(self) -> bool:
        return self.status == "ok"
