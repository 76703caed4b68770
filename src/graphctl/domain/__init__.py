"""Domain layer — graph model and algorithm selection.

This layer depends only on stdlib.
It must never import from services, infrastructure, commands, or config.
"""
