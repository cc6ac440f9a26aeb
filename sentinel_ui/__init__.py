"""
System Sentinel dashboard: live memory metrics and a confirm-before-execute assistant
"""

__version__ = "0.1.0"
