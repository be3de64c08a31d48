#!/usr/bin/env python3
"""BatchRename - Interactive batch renaming of files and folders."""

from batchrename.cli import main

if __name__ == "__main__":
    main()
