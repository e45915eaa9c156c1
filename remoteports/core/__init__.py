"""Core infrastructure: configuration, logging, remote channels, platforms."""
