"""
Test Suite for SubTrack

Test Structure:
- fixtures/: Shared test data builders
- unit/: Unit tests mirroring src/ package structure
- integration/: CLI, storage and configuration tests

Test Data:
All subscriptions are synthetic. Dates are pinned to a fixed "today"
(2025-12-10) so results do not depend on when or where the suite runs.
"""
