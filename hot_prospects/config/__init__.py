"""
Configuration module.

Frozen defaults, YAML overrides and validation for storage, reminders,
scan parsing and logging.
"""
