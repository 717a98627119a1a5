"""Tracking links with click counts and browser-reported locations."""
