"""personcheck test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- functional/   : User-visible flows (the CLI) tested end-to-end at the boundary.
- contract/     : The shipped Person contract run against many Person shapes.
- fixtures/     : Sample Person classes and shared pytest fixtures (no tests here).

General guidance
- Keep unit fast and deterministic; build throwaway modules with
  ``types.ModuleType`` instead of touching ``sys.modules``.
- Functional asserts user-observable results (exit codes, output), not internals.
- Contract parametrizes Person shapes to ensure the checks accept all of them.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
"""
