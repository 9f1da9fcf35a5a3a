"""
utils/ — Text normalization and the ranking index loader.
"""
