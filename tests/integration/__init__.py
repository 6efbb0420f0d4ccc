"""
tests.integration

End-to-end tests that run regdump as a separate process.
"""
