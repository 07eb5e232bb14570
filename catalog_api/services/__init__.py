"""Services Layer — request handlers between routes and repositories.

Invariants:
    - Services take their repository by injection (constructor argument)
    - Services raise core/errors.py types only; they never build HTTP responses
"""
