"""
Textual user interface for the sentinel dashboard
"""
