"""
Core building blocks: transaction model, normalization and retry.
"""
