"""Domain layer — value types, calendar rules, and service contracts.

This layer depends only on stdlib, python-dateutil, and pydantic.
Concrete timezone and clock services live in the infrastructure layer and
are wired in through :mod:`chronozone.domain.ports`.
"""
