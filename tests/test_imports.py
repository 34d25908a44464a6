import pytest
import importlib

def test_imports():
    """Verify that critical modules can be imported without error."""
    modules_to_test = [
        "core",
        "core.session",
        "loaders",
    ]
    
    for module_name in modules_to_test:
        try:
            importlib.import_module(module_name)
        except Exception as e:
            pytest.fail(f"Failed to import {module_name}: {e}")

def test_loaders_import_first():
    """loaders pulls in core on its own; the session module must still resolve."""
    loaders = importlib.import_module("loaders.location")
    session = importlib.import_module("core.session")
    assert session.LocationResolver is loaders.LocationResolver
