"""Ignore configuration: the ignore file, its defaults and the first-run prompt."""
