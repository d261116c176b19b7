"""
Logging configuration and utilities for the mission engine.
"""
from .config import configure_logging, get_logger, get_mission_logger

__all__ = ["configure_logging", "get_logger", "get_mission_logger"]
