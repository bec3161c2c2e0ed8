"""
Input device discovery.
"""
