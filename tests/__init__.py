"""
Test suite for the cobalt sulfate BPR calculator

Contains:
- tests/unit/          : Unit tests for individual modules and the full pipeline
"""
