"""
Project graph interfaces and the Xcode implementation.
"""

from .xcode import XcodeProjectAdapter, load_project

__all__ = ['XcodeProjectAdapter', 'load_project']
