"""SEMF utilities package.

Constants, exceptions, formatting, validation and logging helpers used
throughout the application.
"""
