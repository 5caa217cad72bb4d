"""
Per-import mapping from section name to the GanttPRO ID it was created with
"""
from typing import Dict, Optional

from models import RemoteId


class SectionRegistry:
    """
    Built left to right while tasks are created. One instance per import;
    never share it between imports. The first registration for a name wins.
    """

    def __init__(self):
        self._ids: Dict[str, RemoteId] = {}

    def register(self, name: str, remote_id: RemoteId) -> bool:
        """Store the ID for a section. Returns False if the name was already taken."""
        if name in self._ids:
            return False
        self._ids[name] = remote_id
        return True

    def resolve(self, name: Optional[str]) -> Optional[RemoteId]:
        if not name:
            return None
        return self._ids.get(name)

    def __contains__(self, name) -> bool:
        return name in self._ids

    def __len__(self) -> int:
        return len(self._ids)
