"""Shared utilities for WorldClock."""
