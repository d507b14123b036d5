from .base import Extraction, HtmlPageSource, ResultSource
from .permissive import PermissiveDedupSource
from .selector_scan import SelectorScanSource
from .table_rows import FixedTableRowSource

__all__ = [
    "Extraction",
    "FixedTableRowSource",
    "HtmlPageSource",
    "PermissiveDedupSource",
    "ResultSource",
    "SelectorScanSource",
]
