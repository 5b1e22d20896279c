"""
Data models for the application.
"""
from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

@dataclass(frozen=True)
class Event:
    """Represents a single incident row of the Event table.

    Optional fields use None for NULL; an empty string is a present value.
    """
    id: int
    location: str
    department: str
    category: str
    priority: str
    description: Optional[str]
    remarks: Optional[str]
    reportedby: int
    operativeid: Optional[int]

    def to_dict(self) -> Dict[str, Any]:
        """Return the JSON-ready mapping in column order."""
        return asdict(self)
