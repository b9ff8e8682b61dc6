"""
Infrastructure layer for mutstd.
"""
