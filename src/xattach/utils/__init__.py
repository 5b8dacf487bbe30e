"""Utilities for xattach."""

from xattach.utils.config import Config, get_xattach_dir
from xattach.utils.exceptions import XattachError

__all__ = ["Config", "XattachError", "get_xattach_dir"]
