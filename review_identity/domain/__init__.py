"""Domain layer: entities, enums, error catalogues, value objects and ports.

Pure business rules. Nothing here imports from application, infrastructure
or presentation.
"""
