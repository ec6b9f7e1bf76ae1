"""Unit tests.

Purpose
- Verify a single personcheck module in isolation: numeric coercion,
  construction, member lookup, resolution, the subject adapter and checks.

Guidelines
- Build throwaway module graphs with `tests.fixtures.modules` instead of
  touching ``sys.modules``.
- Use the sample shapes in `tests.fixtures.people` rather than ad hoc classes
  where one fits.
"""
