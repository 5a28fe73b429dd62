# pylint: disable=c-extension-no-member
from typing import Union

from dependency_injector import containers, providers

from vite_assets.misc.utils import as_bool
from vite_assets.models.enums import StrictnessPolicy
from vite_assets.models.roots import Roots
from vite_assets.services.build_config_service import BuildConfigService
from vite_assets.services.dev_mode_probe import DevModeProbe
from vite_assets.services.html_tag_service import HtmlTagService
from vite_assets.services.output_path_resolver import OutputPathResolver
from vite_assets.services.template_service import TemplateService
from vite_assets.services.vite_asset_resolver import ViteAssetResolver
from vite_assets.services.vite_manifest_service import ViteManifestService


def as_strictness_policy(debug: Union[str, bool, None]) -> StrictnessPolicy:
    return StrictnessPolicy.from_debug(as_bool(debug))


def as_config_or_default(value: Union[str, None], default: str) -> str:
    return value if value else default


class Services(containers.DeclarativeContainer):
    config = providers.Configuration()

    strictness = providers.Callable(as_strictness_policy, config.app.debug)

    main_entry = providers.Callable(
        as_config_or_default, config.vite.main_entry, "src/main.js"
    )

    roots = providers.Singleton(
        Roots,
        index=config.roots.index,
        base=config.roots.base,
        config=config.roots.config,
    )

    build_config_service = providers.Singleton(
        BuildConfigService,
        roots=roots,
        config_file=providers.Callable(
            as_config_or_default, config.vite.config_file, "vite.config.json"
        ),
    )

    dev_mode_probe = providers.Singleton(
        DevModeProbe,
        roots=roots,
        strictness=strictness,
        dev_file=providers.Callable(as_config_or_default, config.vite.dev_file, ".dev"),
        dev_server_key=providers.Callable(
            as_config_or_default, config.vite.dev_server_key, "VITE_SERVER"
        ),
    )

    output_path_resolver = providers.Singleton(
        OutputPathResolver,
        roots=roots,
        build_config_service=build_config_service,
    )

    vite_manifest_service = providers.Singleton(
        ViteManifestService,
        roots=roots,
        output_path_resolver=output_path_resolver,
        strictness=strictness,
    )

    html_tag_service = providers.Singleton(HtmlTagService)

    # a fresh resolver per page, the shared caches above are read-only once loaded
    vite_asset_resolver = providers.Factory(
        ViteAssetResolver,
        dev_mode_probe=dev_mode_probe,
        build_config_service=build_config_service,
        output_path_resolver=output_path_resolver,
        vite_manifest_service=vite_manifest_service,
        html_tag_service=html_tag_service,
    )

    template_service = providers.Singleton(
        TemplateService,
        jinja_template_directory=config.templates.jinja_path,
        asset_resolver_factory=vite_asset_resolver.provider,
        header_template=config.templates.header_template,
    )
