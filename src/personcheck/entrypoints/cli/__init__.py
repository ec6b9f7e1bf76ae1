"""The ``personcheck`` command-line interface."""
