"""
Unit tests for the deployment build script.
"""

import importlib.util
from pathlib import Path

import tomllib

PROJECT_ROOT = Path(__file__).resolve().parents[2]


def load_build_script():
    spec = importlib.util.spec_from_file_location("build_script", PROJECT_ROOT / "scripts" / "build.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_runtime_dependencies_follow_pyproject():
    """Test that bundled requirements are the declared ones without the layer-provided Powertools."""
    build = load_build_script()
    with (PROJECT_ROOT / "pyproject.toml").open("rb") as f:
        declared = tomllib.load(f)["project"]["dependencies"]

    bundled = build.runtime_dependencies(PROJECT_ROOT / "pyproject.toml")

    assert bundled == [d for d in declared if not d.startswith("aws-lambda-powertools")]
    assert any(d.startswith("httpx") for d in bundled)
    assert any(d.startswith("aws-lambda-env-modeler") for d in bundled)


def test_runtime_dependencies_from_other_project(tmp_path):
    pyproject = tmp_path / "pyproject.toml"
    pyproject.write_text(
        '[project]\nname = "x"\nversion = "0"\n'
        'dependencies = ["aws-lambda-powertools[tracer]>=2", "requests>=2"]\n'
    )

    assert load_build_script().runtime_dependencies(pyproject) == ["requests>=2"]
