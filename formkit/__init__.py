"""
formkit — fluent form fields that know their validation rules.
"""

__version__ = "0.1.0"
