from advent_days.models.answer import Answer, Selector
from advent_days.models.config import AppConfig

__all__ = ["Answer", "AppConfig", "Selector"]
