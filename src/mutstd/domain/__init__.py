"""
Domain layer for mutstd.
"""
