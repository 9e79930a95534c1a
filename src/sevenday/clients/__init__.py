"""Input clients for sevenday."""
