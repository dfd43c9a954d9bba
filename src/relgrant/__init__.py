"""relgrant - relationship-based access control on top of a Keto tuple store."""

__version__ = "0.1.0"
