"""Infrastructure layer — timezone database and wall-clock access.

This layer implements the service contracts declared in
:mod:`chronozone.domain.ports` on top of stdlib ``zoneinfo`` (IANA data,
with the ``tzdata`` distribution as fallback). It may import domain
errors and contracts; it must never import from services, commands, or
output.
"""
