"""Infrastructure Layer — database client, repositories and logging setup.

Invariants:
    - Infrastructure never imports from api/ or services/
    - All driver exceptions are mapped to core/errors.py types before leaving this layer
"""
