from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Any

# --- fixed response messages ---
ENQUEUED_MESSAGE = "Successfully enqueued event"
DEQUEUED_MESSAGE = "Successfully dequeued event"
STATUS_OK = "OK"

# --- request ---
@dataclass(frozen=True)
class EnqueueRequest:
    """Decoded POST /enqueue body. Missing `event` decodes to ""."""
    event: str = ""

# --- responses ---
@dataclass(frozen=True)
class BaseResponse:
    """Common shape for all JSON responses; key order in to_record is the wire order."""
    def to_record(self) -> Dict[str, Any]:
        return {}

@dataclass(frozen=True)
class EnqueueResponse(BaseResponse):
    event: str = ""
    message: str = ENQUEUED_MESSAGE

    def to_record(self) -> Dict[str, Any]:
        return {"message": self.message, "event": self.event}

@dataclass(frozen=True)
class DequeueResponse(BaseResponse):
    event: str = ""
    message: str = DEQUEUED_MESSAGE

    def to_record(self) -> Dict[str, Any]:
        return {"message": self.message, "event": self.event}

@dataclass(frozen=True)
class StatusResponse(BaseResponse):
    """Aggregate occupancy snapshot."""
    size: int = 0
    capacity: int = 0
    is_empty: bool = True
    is_full: bool = False
    status: str = field(default=STATUS_OK)

    def to_record(self) -> Dict[str, Any]:
        return {
            "status": self.status,
            "size": self.size,
            "capacity": self.capacity,
            "isEmpty": self.is_empty,
            "isFull": self.is_full,
        }

@dataclass(frozen=True)
class SizeResponse(BaseResponse):
    size: int = 0

    def to_record(self) -> Dict[str, Any]:
        return {"size": self.size}

@dataclass(frozen=True)
class CapacityResponse(BaseResponse):
    capacity: int = 0

    def to_record(self) -> Dict[str, Any]:
        return {"capacity": self.capacity}

@dataclass(frozen=True)
class IsEmptyResponse(BaseResponse):
    is_empty: bool = True

    def to_record(self) -> Dict[str, Any]:
        return {"isEmpty": self.is_empty}

@dataclass(frozen=True)
class IsFullResponse(BaseResponse):
    is_full: bool = False

    def to_record(self) -> Dict[str, Any]:
        return {"isFull": self.is_full}
