"""
TON Transaction Utilities

Field accessors for TON blockchain transactions: direction classification,
sender resolution, value amounts and text comments recovered from incoming
message bodies, plus an async retry helper for resilient RPC calls.
"""

__version__ = "0.1.0"
