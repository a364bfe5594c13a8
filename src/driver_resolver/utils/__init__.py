"""Utility helpers for driver-resolver."""
