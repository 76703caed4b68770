"""Service layer — orchestration returning ServiceResult.

Services may import from domain, engines, and infrastructure layers.
They must never import from commands or output.
"""
