"""
Utilities package: settings and logging.
"""
