"""
API client modules for GanttPRO
"""
from .ganttpro_client import GanttProClient

__all__ = ['GanttProClient']
