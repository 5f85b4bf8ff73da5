"""Infrastructure layer — file input.

This layer handles reading meeting and holiday files from disk and
hands already-parsed values to the domain layer.
"""
