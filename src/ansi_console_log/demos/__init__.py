"""Runnable demo programs. Not part of the public API."""
