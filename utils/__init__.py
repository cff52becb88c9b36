"""
utils package
-------------

Contains utility modules used throughout the care home engine.

Includes helpers for loading configuration constants, logger setup, and time and shift parsing.
"""
