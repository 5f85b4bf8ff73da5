"""Domain layer — calendar arithmetic, date values, and counting rules.

This layer depends only on stdlib.
It must never import from services, infrastructure, commands, or config.
"""
