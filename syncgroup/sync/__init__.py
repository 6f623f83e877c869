"""
Group synchronization package for reconciling project groups with directories.
"""

from .synchronizer import Synchronizer, SyncResult

__all__ = ['Synchronizer', 'SyncResult']
