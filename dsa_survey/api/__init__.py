"""HTTP API for the survey service."""
