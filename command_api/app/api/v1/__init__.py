"""Version 1 of the Command API."""
