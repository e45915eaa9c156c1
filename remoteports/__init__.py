"""remoteports — discover and kill listening TCP ports on a remote host over SSH."""

__version__ = "0.1.0"
