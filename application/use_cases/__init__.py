"""Application use cases."""
from .load_match_timeline import LoadMatchTimelineUseCase, TimelineResult

__all__ = ["LoadMatchTimelineUseCase", "TimelineResult"]
