"""XAES-256-GCM authenticated encryption with 192-bit nonces; see ``xaesgcm.cipher``."""

__version__ = "0.1.0"
__all__ = ["cipher"]