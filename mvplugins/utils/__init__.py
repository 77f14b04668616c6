"""
Utility modules shared by the plugins.
"""
