"""Functional tests.

Purpose
- Drive personcheck the way users do: the ``personcheck`` CLI through
  ``CliRunner`` and the pytest plugin through ``pytester``.

Guidelines
- Assert exit codes, outcomes and printed messages, not internal state.
"""
