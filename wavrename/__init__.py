"""Rename VOICEVOX-style wav exports using their sibling caption txt files.

This package provides typed, testable modules that the CLI script imports.
"""
