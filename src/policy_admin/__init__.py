"""Admin panel service for tracked policies and political parties."""

__version__ = "1.0.0"
