"""Flight booking test suite."""
