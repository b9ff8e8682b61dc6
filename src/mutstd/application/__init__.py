"""
Application layer for mutstd.
"""
