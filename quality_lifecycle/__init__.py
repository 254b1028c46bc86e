"""
Quality Lifecycle - quality-record lifecycle engine.

Governs how Non-Conformance Reports (NCR), Corrective/Preventive Actions
(CAPA), Supplier Corrective Action Requests (SCAR) and Material Review Board
dispositions (MRB) move through their statuses, how a status is projected
into a milestone timeline, and how transitions are validated and applied.
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
