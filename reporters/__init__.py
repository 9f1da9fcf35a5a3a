"""
reporters/ — Terminal rendering and JSON export.
"""
