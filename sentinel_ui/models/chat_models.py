"""
Data models for the assistant transcript and proposed actions
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping

from pydantic import BaseModel, ConfigDict


class Role(Enum):
    """Transcript message author"""

    USER = "user"
    ASSISTANT = "assistant"


class Risk(Enum):
    """Risk level attached to a proposed action by the backend"""

    MODERATE = "moderate"
    HIGH = "high"


@dataclass
class ChatMessage:
    """One transcript entry; content grows only while streaming is set"""

    role: Role
    content: str = ""
    streaming: bool = False


class ProposedAction(BaseModel):
    """Remediation proposed alongside an assistant completion"""

    model_config = ConfigDict(frozen=True)

    description: str
    risk: Risk
    payload: Dict[str, Any]  # Handed back to execute_action untouched

    @classmethod
    def from_payload(cls, data: Mapping[str, Any]) -> "ProposedAction":
        """Build from the `action` mapping of a claude-done event"""
        return cls(description=data["description"], risk=data["risk"], payload=dict(data))

    @property
    def is_high_risk(self) -> bool:
        return self.risk is Risk.HIGH
