"""Command line interface for the video wall calculator."""
