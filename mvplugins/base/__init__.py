"""
Base package for the plugin toolkit.

This package contains the foundational classes: the plugin base class,
the plugin registry and command dispatch, plugin configuration and errors.
"""
