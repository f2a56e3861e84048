"""HTTP API for practice evaluation."""
