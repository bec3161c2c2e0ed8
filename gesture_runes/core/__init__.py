"""
Stroke capture, command execution and the application flows.
"""
