from .client import AirwatchApi

__all__ = ["AirwatchApi"]
