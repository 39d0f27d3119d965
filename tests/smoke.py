"""
Smoke tests for the measurement app.
Run with: python tests/smoke.py
"""

import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

def test_app_imports():
    """Verify app can be imported without errors."""
    from app import app
    assert app is not None
    print("OK: App imports successfully")

def test_models_import():
    """Verify models can be imported."""
    from models import Quantity, Kind, System, Recipe, Ingredient
    assert Quantity is not None
    assert Recipe is not None
    print("OK: Models import successfully")

def test_engine_import():
    """Verify the engine operations can be imported."""
    from services import parse, add, scale, render
    assert callable(parse)
    assert callable(add)
    assert callable(scale)
    assert callable(render)
    print("OK: Engine imports successfully")

def test_constants_import():
    """Verify constants can be imported."""
    from constants import VOLUME_UNITS, WEIGHT_UNITS, VALID_SYSTEMS
    assert any(u.name == 'cup' for u in VOLUME_UNITS)
    assert any(u.name == 'pound' for u in WEIGHT_UNITS)
    assert 'metric' in VALID_SYSTEMS
    print("OK: Constants import successfully")

def test_conversion_constants_unchanged():
    """Verify critical base-unit multiples have expected values."""
    from constants import MILLILITER, TEASPOON, CUP, GRAM, OUNCE, POUND

    # These values must not change
    assert MILLILITER == 24
    assert TEASPOON == MILLILITER * 5
    assert CUP == TEASPOON * 48
    assert GRAM == 8000
    assert OUNCE == GRAM * 28350 // 1000
    assert POUND == OUNCE * 16
    print("OK: Conversion constants unchanged")

def test_app_runs():
    """Verify app can create test client."""
    from app import app
    app.config['TESTING'] = True
    with app.test_client() as client:
        response = client.get('/api/units')
        assert response.status_code == 200
        print("OK: App serves unit list")

if __name__ == '__main__':
    print("Running smoke tests...\n")

    tests = [
        test_app_imports,
        test_models_import,
        test_engine_import,
        test_constants_import,
        test_conversion_constants_unchanged,
        test_app_runs,
    ]

    failed = 0
    for test in tests:
        try:
            test()
        except Exception as e:
            print(f"FAIL: {test.__name__} - {e}")
            failed += 1

    print(f"\n{'='*40}")
    if failed:
        print(f"FAILED: {failed}/{len(tests)} tests")
        sys.exit(1)
    else:
        print(f"PASSED: {len(tests)}/{len(tests)} tests")
        sys.exit(0)
