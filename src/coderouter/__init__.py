"""coderouter - run AI coding assistant CLIs with different provider configs."""

__version__ = "0.1.0"
