"""
TON transaction extraction and decoding.

This module provides tools for loading serialized transactions and decoding
their inbound message fields into plain values.
"""
