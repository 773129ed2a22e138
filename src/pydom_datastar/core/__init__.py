"""
Demo configuration and logging.
"""
