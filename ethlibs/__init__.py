"""Typed Ethereum JSON-RPC values: hex data, addresses, quantities, block specifiers, logs, filters, blooms and signatures."""

__version__ = "0.1.0"