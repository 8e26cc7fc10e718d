"""Shared utilities: logging and tracing. No business logic."""
