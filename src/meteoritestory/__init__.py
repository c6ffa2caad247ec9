"""Narrative four-scene viewer of meteorite landing records."""
