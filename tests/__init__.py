"""
Tests for the combat log toolkit.

This package contains tests for:
- Line decoding and log loading
- Encounter segmentation (life window merging and alive set tracking)
- Filtered views and filters
- Damage and healing extraction
- Statistics, configuration and the command-line interface
"""
