"""Contract tests.

Purpose
- Run the shipped `personcheck.contract.PersonContract` against many Person
  shapes to keep the checks accepting every idiomatic way of writing one.

Guidelines
- Parametrize shapes via fixtures.
- Assert only the public contract (inputs/outputs/effects), not internals.
"""
