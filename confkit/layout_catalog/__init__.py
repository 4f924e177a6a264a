"""Layout catalog merge for conference layout pickers."""
from confkit.layout_catalog.models import Layout, RawLayout, RawLayoutGroup
from confkit.layout_catalog.service import merge_layout_catalog

__all__ = ["Layout", "RawLayout", "RawLayoutGroup", "merge_layout_catalog"]
