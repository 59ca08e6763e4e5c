"""dashkit test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/function.
- contract/     : Shared behavior/invariants enforced across every cache store.
- e2e/          : The ``dashkit`` CLI invoked end-to-end through Click's runner.

General guidance
- Keep unit tests fast and deterministic; prefer tiny fakes over mocks.
- Contract tests parametrize implementations to ensure consistent behavior.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
- Markers: unit, contract, property, e2e
"""
