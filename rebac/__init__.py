"""rebac: relationship-based access-control resolution core.

Tuple validation and encoding, object-index construction, a short-lived
decision cache, and access-list query generation for SQL backends.
"""

__version__ = "1.0.0"
