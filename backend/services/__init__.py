"""
Services that sit around the engine (rendering).
"""
