"""Tests for target path computation and the self-reference guard."""

import os

import pytest

from plugin_deploy.api.exceptions import ConfigurationError
from plugin_deploy.core import TargetLocator, canonical_path
from plugin_deploy.models import DeployConfig, DeploymentMode, PluginManifest


def _config(install_root, output_dir, plugin_id="sample"):
    return DeployConfig(
        mode=DeploymentMode.LINK,
        project_root=output_dir.parent,
        output_dir=output_dir,
        install_root=install_root,
        manifest=PluginManifest(id=plugin_id),
    )


def test_target_path_layout(tmp_path):
    location = TargetLocator().locate(_config(tmp_path / "vault", tmp_path / "dist"))

    assert location.target_path == tmp_path / "vault" / ".obsidian" / "plugins" / "sample"
    assert location.output_dir == tmp_path / "dist"
    assert not location.identical


def test_identical_path(tmp_path):
    output_dir = tmp_path / "vault" / ".obsidian" / "plugins" / "sample"
    location = TargetLocator().locate(_config(tmp_path / "vault", output_dir))
    assert location.identical


def test_identical_path_through_normalization(tmp_path):
    output_dir = tmp_path / "vault" / ".obsidian" / "plugins" / "sample"
    install_root = tmp_path / "vault" / "sub" / ".."
    location = TargetLocator().locate(_config(install_root, output_dir))
    assert location.identical


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unavailable")
def test_identical_path_through_linked_install_root(tmp_path):
    real_vault = tmp_path / "real_vault"
    output_dir = real_vault / ".obsidian" / "plugins" / "sample"
    output_dir.mkdir(parents=True)
    (tmp_path / "vault_link").symlink_to(real_vault, target_is_directory=True)

    location = TargetLocator().locate(_config(tmp_path / "vault_link", output_dir))
    assert location.identical


def test_existing_link_at_target_is_not_followed(tmp_path):
    """A target link already pointing at dist is a reuse case, not a no-op."""
    dist = tmp_path / "dist"
    dist.mkdir()
    plugins = tmp_path / "vault" / ".obsidian" / "plugins"
    plugins.mkdir(parents=True)
    (plugins / "sample").symlink_to(dist, target_is_directory=True)

    location = TargetLocator().locate(_config(tmp_path / "vault", dist))
    assert not location.identical


def test_canonical_path_keeps_last_component(tmp_path):
    real = tmp_path / "real"
    real.mkdir()
    link = tmp_path / "link"
    link.symlink_to(real, target_is_directory=True)

    assert canonical_path(link) == tmp_path.resolve() / "link"
    assert canonical_path(link / "child") == real.resolve() / "child"


def test_output_inside_target_is_refused(tmp_path):
    """Project checked out in the plugin folder with dist/ below it."""
    target = tmp_path / "vault" / ".obsidian" / "plugins" / "sample"
    with pytest.raises(ConfigurationError, match="lies inside the install target"):
        TargetLocator().locate(_config(tmp_path / "vault", target / "dist"))


def test_target_inside_output_is_refused(tmp_path):
    output_dir = tmp_path / "vault" / ".obsidian"
    with pytest.raises(ConfigurationError, match="lies inside the output directory"):
        TargetLocator().locate(_config(tmp_path / "vault", output_dir))


def test_sibling_with_common_prefix_is_not_nested(tmp_path):
    plugins = tmp_path / "vault" / ".obsidian" / "plugins"
    location = TargetLocator().locate(_config(tmp_path / "vault", plugins / "sample-dist"))
    assert not location.identical
