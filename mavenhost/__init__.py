"""Serve hosted Java project sources as a Maven/Gradle repository."""

__version__ = "1.0.0"
