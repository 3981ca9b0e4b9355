"""Shared helpers for the job matcher."""
