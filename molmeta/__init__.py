"""molmeta — crystallographic and compositional summaries of loaded structures."""

from molmeta.analysis import StructureSummary, summarize
from molmeta.state import ViewerState

__version__ = "0.1.0"

__all__ = ["StructureSummary", "ViewerState", "summarize", "__version__"]
