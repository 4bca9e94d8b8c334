"""Pydantic output schemas for command results."""
