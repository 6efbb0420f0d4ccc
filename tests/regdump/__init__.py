"""
tests.regdump

Unit tests for the regdump command-line package: logging and environment
configuration, report rendering, and the entry point's exit codes.
"""
