"""Traversal and dispatch engine for recursive copies.

This package holds the TreeCopier class that walks a source tree and routes every
entry to the file, directory or symlink copy strategy, together with the small value
types it passes around during traversal.
"""
