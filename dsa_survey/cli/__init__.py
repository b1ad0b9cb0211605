"""Command line interface for dsa-survey."""
