"""Basic value types and binary parsing for the Zcash Wallet Interchange Format."""

__version__ = "0.1.0"