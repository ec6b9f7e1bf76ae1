"""personcheck

A contract-test harness for "Person" data classes. It locates the class at
runtime, builds an instance without knowing its constructor, and verifies the
name, age, full-name, birthday, and rename behaviour through introspection.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
