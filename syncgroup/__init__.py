"""
syncgroup - keep Xcode project groups in step with folders on disk
"""

from syncgroup.cli import cli
from syncgroup.errors import SyncError
from syncgroup.sync import Synchronizer, SyncResult

__version__ = "0.1.0"
__all__ = [
    "cli",
    "SyncError",
    "Synchronizer",
    "SyncResult",
]
