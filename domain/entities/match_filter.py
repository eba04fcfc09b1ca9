"""Optional narrowing applied by the backend when listing matches."""
from dataclasses import dataclass
from typing import Dict, Optional


@dataclass(frozen=True)
class MatchFilter:
    queue_id: Optional[int] = None
    started_after: Optional[int] = None   # Unix seconds, inclusive
    started_before: Optional[int] = None  # Unix seconds, exclusive

    def to_params(self) -> Dict[str, str]:
        """Query parameters understood by ``GET /riot/matches``."""
        params: Dict[str, str] = {}
        if self.queue_id is not None:
            params['queueID'] = str(self.queue_id)
        if self.started_after is not None:
            params['from'] = str(self.started_after)
        if self.started_before is not None:
            params['to'] = str(self.started_before)
        return params
