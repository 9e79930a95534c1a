"""Utility helpers for sevenday."""
