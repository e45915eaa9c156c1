"""Pydantic value types shared across the package."""

from remoteports.schemas.platform import PlatformInfo, RemotePlatform
from remoteports.schemas.port import PortScanResult, RemotePort

__all__ = ["PlatformInfo", "PortScanResult", "RemotePlatform", "RemotePort"]
