"""Base models shared across the package."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class Event:
    """Standard event envelope for streaming."""

    event_id: str
    event_type: str  # entity.action (e.g., operation.credit)
    event_time: datetime
    source: str  # Service/system that generated
    subject: str  # External id of the account affected
    data: dict
    metadata: dict = field(default_factory=dict)
