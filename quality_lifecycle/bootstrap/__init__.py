"""Composition root for wiring dependencies.

Callers depend on the application ports; this package is the only place
that chooses concrete collaborators.
"""
