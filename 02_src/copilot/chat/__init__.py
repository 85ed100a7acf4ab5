"""Chat session module."""

from .builder import TranscriptBuilder
from .manager import SessionManager
from .prompts import SYSTEM_INSTRUCTION, WORKFLOWS, Workflow
from .session import ChatSession, IChatSession
from .transcript import Transcript

__all__ = [
    "ChatSession",
    "IChatSession",
    "SessionManager",
    "SYSTEM_INSTRUCTION",
    "Transcript",
    "TranscriptBuilder",
    "WORKFLOWS",
    "Workflow",
]
