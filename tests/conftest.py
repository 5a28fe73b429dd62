import os
from typing import Callable

import pytest

from vite_assets.models.enums import StrictnessPolicy
from vite_assets.models.roots import Roots
from vite_assets.services.build_config_service import BuildConfigService
from vite_assets.services.dev_mode_probe import DevModeProbe
from vite_assets.services.html_tag_service import HtmlTagService
from vite_assets.services.output_path_resolver import OutputPathResolver
from vite_assets.services.vite_asset_resolver import ViteAssetResolver
from vite_assets.services.vite_manifest_service import ViteManifestService
from tests.utils import write_build_config


@pytest.fixture
def site(tmp_path):
    """
    A public folder setup: the project root holds `public` (index root) and
    `config`, vite builds into `public/dist`.
    """
    base = tmp_path / "project"
    index = base / "public"
    config = base / "config"
    index.mkdir(parents=True)
    config.mkdir()
    return base


@pytest.fixture
def roots(site) -> Roots:
    return Roots(
        index=str(site / "public"), base=str(site), config=str(site / "config")
    )


@pytest.fixture
def dist_dir(site) -> str:
    return str(site / "public" / "dist")


@pytest.fixture
def build_config(roots):
    write_build_config(roots.config, "public/dist")


@pytest.fixture
def legacy_build_config(roots):
    write_build_config(roots.config, "public/dist", legacy=True)


@pytest.fixture
def create_resolver(roots) -> Callable[..., ViteAssetResolver]:
    def _create_resolver(
        strictness: StrictnessPolicy = StrictnessPolicy.STRICT,
        resolver_roots: Roots = roots,
    ) -> ViteAssetResolver:
        build_config_service = BuildConfigService(resolver_roots)
        output_path_resolver = OutputPathResolver(resolver_roots, build_config_service)
        return ViteAssetResolver(
            dev_mode_probe=DevModeProbe(resolver_roots, strictness),
            build_config_service=build_config_service,
            output_path_resolver=output_path_resolver,
            vite_manifest_service=ViteManifestService(
                resolver_roots, output_path_resolver, strictness
            ),
            html_tag_service=HtmlTagService(),
        )

    return _create_resolver


@pytest.fixture
def dev_server(roots):
    dev_file = os.path.join(roots.effective_root, ".dev")
    with open(dev_file, "w", encoding="utf-8") as file:
        file.write("VITE_SERVER=http://localhost:5173\n")
    yield "http://localhost:5173"
