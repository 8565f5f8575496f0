"""
Generators — produce source files for an application's forms.

Each generator module exposes a ``generate_*()`` function that returns
a list of ``GeneratedFile`` instances. Nothing here touches the disk.
"""
