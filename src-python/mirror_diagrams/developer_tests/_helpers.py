"""
Shared helpers for the developer tests.
"""

import logging
import sys
from contextlib import contextmanager
from pathlib import Path

# Add the src-python directory to the path
src_path = Path(__file__).parent.parent.parent
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))


# Tolerance for floating-point comparisons
TOLERANCE = 1e-9
ANGLE_TOLERANCE = 1e-9  # radians


def assert_close(actual, expected, tol=TOLERANCE, msg=""):
    """Assert that two values are close within tolerance."""
    if abs(actual - expected) > tol:
        raise AssertionError(
            f"{msg}: expected {expected}, got {actual} (diff: {abs(actual - expected)})"
        )


def assert_point_close(actual, expected, tol=TOLERANCE, msg=""):
    """Assert that two points are close within tolerance (per coordinate)."""
    assert_close(actual.x, expected.x, tol, f"{msg} (x)")
    assert_close(actual.y, expected.y, tol, f"{msg} (y)")


class ListHandler(logging.Handler):
    """Logging handler that keeps the records it receives."""

    def __init__(self, level=logging.INFO):
        super().__init__(level)
        self.records = []

    def emit(self, record):
        self.records.append(record)


@contextmanager
def capture_logs(logger_name='mirror_diagrams', level=logging.INFO):
    """Collect records of `level` and above emitted below `logger_name`."""
    logger = logging.getLogger(logger_name)
    handler = ListHandler(level)
    old_level = logger.level
    logger.addHandler(handler)
    logger.setLevel(level)
    try:
        yield handler.records
    finally:
        logger.removeHandler(handler)
        logger.setLevel(old_level)


def run_tests(tests):
    """
    Run (name, function) pairs, print a summary and return True if all passed.
    """
    passed = 0
    errors = []

    for name, test_func in tests:
        try:
            test_func()
            passed += 1
        except Exception as e:
            errors.append((name, str(e)))
            print(f"\n  FAILED: {name}")
            print(f"    Error: {e}")

    print("\n" + "=" * 78)
    print(f"SUMMARY: {passed}/{len(tests)} tests passed")
    print("=" * 78)

    if errors:
        print("\nFailed tests:")
        for name, error in errors:
            print(f"  - {name}: {error}")
        return False

    print("\nAll tests passed!")
    return True
