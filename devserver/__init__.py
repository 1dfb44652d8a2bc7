"""Local mock of the Pronto provisioning API for development environments."""

__version__ = "1.0.0"
