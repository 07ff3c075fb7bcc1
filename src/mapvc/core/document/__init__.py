"""Live map document integration.

The live document is owned by the host: this package only defines the
capability mapvc needs (capture the current content, remove and create single
items) and ships a JSON-file implementation, an in-memory fake and a dry-run
wrapper.
"""

from mapvc.core.document.abc import LiveDocument
from mapvc.core.document.dry_run import DryRunLiveDocument
from mapvc.core.document.fake import FakeLiveDocument
from mapvc.core.document.real import JsonMapDocument, UnconfiguredDocument

__all__ = [
    "DryRunLiveDocument",
    "FakeLiveDocument",
    "JsonMapDocument",
    "LiveDocument",
    "UnconfiguredDocument",
]
