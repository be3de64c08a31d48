"""BatchRename - Interactive batch renaming of files and folders."""

__version__ = "0.1.0"
__author__ = "batch-rename developers"
__description__ = "Batch rename files or folders with prefix, suffix or numbering"
