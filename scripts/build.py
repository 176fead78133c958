#!/usr/bin/env python3
"""
Build script for the status endpoint Lambda functions.

Each function directory under src/ is packaged together with the shared
``service`` package and the runtime dependencies from pyproject.toml.
"""
import os
import shutil
import subprocess
import sys
import tomllib
import zipfile
from pathlib import Path
from typing import List

SHARED_PACKAGE = "service"
SKIPPED_DIRS = {SHARED_PACKAGE, "__pycache__"}
# Provided by the Powertools Lambda layer
LAYER_PROVIDED = ("aws-lambda-powertools",)


def runtime_dependencies(pyproject_path: Path) -> List[str]:
    """Runtime requirements from pyproject.toml, minus those the layer provides."""
    with pyproject_path.open("rb") as f:
        dependencies = tomllib.load(f)["project"]["dependencies"]
    return [d for d in dependencies if not d.startswith(LAYER_PROVIDED)]


def copy_tree(source: Path, destination: Path):
    shutil.copytree(source, destination, dirs_exist_ok=True,
                    ignore=shutil.ignore_patterns("__pycache__", "*.pyc"))


def main():
    """Main build function"""
    project_root = Path(__file__).parent.parent
    src_dir = project_root / "src"
    build_dir = project_root / "build"

    build_dir.mkdir(exist_ok=True)
    dependencies = runtime_dependencies(project_root / "pyproject.toml")

    functions = [d for d in sorted(src_dir.iterdir()) if d.is_dir() and d.name not in SKIPPED_DIRS]

    print(f"Building Lambda functions: {[f.name for f in functions]}")

    for function_dir in functions:
        function_name = function_dir.name
        zip_path = build_dir / f"{function_name}.zip"

        print(f"Building {function_name}...")

        temp_dir = build_dir / f"temp_{function_name}"
        if temp_dir.exists():
            shutil.rmtree(temp_dir)
        temp_dir.mkdir()

        # The entry point adds its parent to sys.path, so service/ sits beside it
        copy_tree(function_dir, temp_dir)
        copy_tree(src_dir / SHARED_PACKAGE, temp_dir / SHARED_PACKAGE)

        print(f"Installing dependencies for {function_name}...")
        subprocess.run([
            sys.executable, "-m", "pip", "install",
            *dependencies,
            "-t", str(temp_dir),
            "--quiet",
        ], check=True)

        print(f"Creating {function_name}.zip...")
        with zipfile.ZipFile(zip_path, 'w', zipfile.ZIP_DEFLATED) as zipf:
            for root, _, files in os.walk(temp_dir):
                for file in files:
                    file_path = Path(root) / file
                    arcname = file_path.relative_to(temp_dir)
                    zipf.write(file_path, arcname)

        shutil.rmtree(temp_dir)

        print(f"{function_name}.zip created ({zip_path.stat().st_size} bytes)")

    print("Build complete!")


if __name__ == "__main__":
    main()
