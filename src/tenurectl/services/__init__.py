"""Service layer — operations returning ServiceResult.

Services may import from the domain layer and config models.
They must never import from commands or output.
"""
