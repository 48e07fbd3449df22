"""Shared enums for models."""

from enum import Enum


class MessageRole(str, Enum):
    """Author of an AI conversation message."""

    USER = "user"
    ASSISTANT = "assistant"

