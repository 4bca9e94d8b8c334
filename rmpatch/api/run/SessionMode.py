"""Run mode."""

from enum import Enum


class SessionMode(str, Enum):
    PATCH = "patch"
    UNDO = "undo"
