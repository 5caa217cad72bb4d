"""
Importers that push work breakdowns into GanttPRO
"""
from .section_registry import SectionRegistry
from .ganttpro_importer import aggregate_outcomes, import_task, import_to_ganttpro

__all__ = ['SectionRegistry', 'aggregate_outcomes', 'import_task', 'import_to_ganttpro']
