"""Utilities.

Modules:
    - source_builder: Build source files out of named, indented sections.
"""
