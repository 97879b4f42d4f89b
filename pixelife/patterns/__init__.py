"""Seed patterns."""
