"""
tests

Test suite for the regdump project.

Subpackages:
    - regdump: Tests for the command-line tool (config, report, entry point)
    - integration: End-to-end runs of the command over files on disk

Top-level modules cover the shared models and the register_decoder library.
"""
