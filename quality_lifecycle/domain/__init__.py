"""Domain layer: status vocabularies, rule tables, projections and errors.

Nothing in this package performs I/O. Collaborators are reached only through
the ports in ``quality_lifecycle.application.ports``.
"""
