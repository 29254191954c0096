"""
Command-line clients.
"""
