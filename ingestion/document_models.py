from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass(frozen=True)
class RawDoc:
    source_id: str  # URL or resolved local path
    text: str  # decoded document body
    metadata: Dict[str, Any] = field(default_factory=dict)  # { "source": "...", "type": "web|text" }
    content_sha1: str = ""
