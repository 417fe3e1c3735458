"""Command-line tools for crossbridge."""
