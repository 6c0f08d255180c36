"""
Shared pytest fixtures for the plugin-deploy test suite.

Each test gets a throwaway plugin project and a separate vault directory
under tmp_path:

  project/
    .env            VAULT_PATH=<vault>
    manifest.json   {"id": "sample"}
    dist/           build output
  vault/
    .obsidian/plugins/sample   deployment target
"""

import json
import logging
import os
from pathlib import Path

import pytest

from plugin_deploy import Deployer


class PluginProject:
    """Helper returned by the plugin_project fixture."""

    def __init__(self, root: Path, vault: Path) -> None:
        self.root = root
        self.vault = vault
        self.root.mkdir()
        self.vault.mkdir()

    @property
    def dist(self) -> Path:
        return self.root / "dist"

    @property
    def env_file(self) -> Path:
        return self.root / ".env"

    @property
    def manifest_path(self) -> Path:
        return self.root / "manifest.json"

    def target(self, plugin_id: str = "sample") -> Path:
        return self.vault / ".obsidian" / "plugins" / plugin_id

    def write_env(self, vault_path=None, raw: str = None) -> Path:
        if raw is None:
            raw = f"VAULT_PATH={vault_path if vault_path is not None else self.vault}\n"
        self.env_file.write_text(raw)
        return self.env_file

    def write_manifest(self, data=None, raw: str = None) -> Path:
        if raw is None:
            raw = json.dumps(data if data is not None else {"id": "sample"})
        self.manifest_path.write_text(raw)
        return self.manifest_path

    def add_output_file(self, relative: str, content="") -> Path:
        path = self.dist / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content)
        return path

    def deployer(self, **options) -> Deployer:
        return Deployer(project_root=self.root, **options)

    def snapshot(self) -> dict:
        """Map of every entry under project and vault to its kind and content."""
        state = {}
        for base in (self.root, self.vault):
            for path in sorted(base.rglob("*")):
                if path.is_symlink():
                    state[str(path)] = ("link", os.readlink(path))
                elif path.is_dir():
                    state[str(path)] = ("dir", None)
                else:
                    state[str(path)] = ("file", path.read_bytes())
        return state


@pytest.fixture
def plugin_project(tmp_path) -> PluginProject:
    """Plugin project with .env and manifest.json in place, dist/ absent."""
    project = PluginProject(tmp_path / "project", tmp_path / "vault")
    project.write_env()
    project.write_manifest()
    return project


@pytest.fixture
def bare_project(tmp_path) -> PluginProject:
    """Plugin project without any configuration files."""
    return PluginProject(tmp_path / "project", tmp_path / "vault")


@pytest.fixture(autouse=True)
def restore_logging():
    yield
    logging.disable(logging.NOTSET)
