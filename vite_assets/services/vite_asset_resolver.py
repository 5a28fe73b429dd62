import logging
from typing import List, Optional

from markupsafe import Markup

from vite_assets.misc.utils import is_style_entry, url_join
from vite_assets.services.build_config_service import BuildConfigService
from vite_assets.services.dev_mode_probe import DevModeProbe
from vite_assets.services.html_tag_service import Attributes, HtmlTagService
from vite_assets.services.output_path_resolver import OutputPathResolver
from vite_assets.services.vite_manifest_service import Manifest, ViteManifestService

logger = logging.getLogger(__name__)

DEV_CLIENT_ENTRY = "@vite/client"
LEGACY_POLYFILLS_SUFFIX = "vite/legacy-polyfills-legacy"
LEGACY_SUFFIX = "-legacy"


def legacy_entry(entry: str) -> str:
    """
    Name of the legacy bundle the legacy plugin emits for ``entry``:
    ``src/main.js`` becomes ``src/main-legacy.js``. Only the second-to-last
    token is suffixed, so ``src/main.module.js`` becomes
    ``src/main.module-legacy.js``, matching the legacy plugin output.
    """
    parts = entry.split(".")
    if len(parts) < 2:
        return entry + LEGACY_SUFFIX
    parts[-2] += LEGACY_SUFFIX
    return ".".join(parts)


class ViteAssetResolver:
    """
    Maps logical Vite entries to script/style markup or plain URLs, for the
    dev server as well as for a production build.

    A resolver holds per-page state: the dev client and the legacy polyfills
    are only emitted by the first ``script()`` call. Create one resolver per
    rendered page.
    """

    def __init__(
        self,
        dev_mode_probe: DevModeProbe,
        build_config_service: BuildConfigService,
        output_path_resolver: OutputPathResolver,
        vite_manifest_service: ViteManifestService,
        html_tag_service: HtmlTagService,
    ):
        self._dev_mode_probe = dev_mode_probe
        self._build_config_service = build_config_service
        self._output_path_resolver = output_path_resolver
        self._vite_manifest_service = vite_manifest_service
        self._html_tag_service = html_tag_service
        self._is_first_script = True

    @property
    def is_first_script(self) -> bool:
        return self._is_first_script

    def is_dev(self) -> bool:
        return self._dev_mode_probe.is_dev()

    def manifest(self) -> Manifest:
        return self._vite_manifest_service.get_manifest()

    def file(self, entry: str, allow_missing: bool = False) -> Optional[str]:
        return self._file(entry, allow_missing, self.is_dev())

    def client(self) -> Optional[Markup]:
        return self._client(self.is_dev())

    def legacy_polyfills(
        self, attributes: Optional[Attributes] = None
    ) -> Optional[Markup]:
        return self._legacy_polyfills(attributes, self.is_dev())

    def legacy_script(
        self,
        entry: str,
        attributes: Optional[Attributes] = None,
        allow_missing: bool = False,
    ) -> Optional[Markup]:
        return self._legacy_script(entry, attributes, allow_missing, self.is_dev())

    def script(
        self,
        entry: str,
        attributes: Optional[Attributes] = None,
        allow_missing: bool = False,
    ) -> Optional[Markup]:
        try:
            dev = self.is_dev()
            file = self._file(entry, allow_missing, dev)
            if file is None and allow_missing:
                return None

            legacy = self._build_config_service.get_build_config().legacy
            # Several script() calls may happen per page, the dev client and
            # the legacy polyfills belong on the page once.
            scripts: List[Optional[Markup]] = [
                self._client(dev) if self._is_first_script else None,
                (
                    self._legacy_polyfills(None, dev)
                    if self._is_first_script and legacy
                    else None
                ),
                (
                    self._legacy_script(entry, None, allow_missing, dev)
                    if legacy
                    else None
                ),
                (
                    self._html_tag_service.script_tag(
                        file, {"type": "module", **(attributes or {})}
                    )
                    if file is not None
                    else None
                ),
            ]
        finally:
            self._is_first_script = False

        fragments = [script for script in scripts if script]
        if not fragments:
            return None
        return Markup("\n").join(fragments)

    def style(
        self,
        entry: str,
        attributes: Optional[Attributes] = None,
        allow_missing: bool = False,
    ) -> Optional[Markup]:
        """
        Stylesheet for ``entry``. A style entry (``main.css``) resolves to its
        own build output, a script entry (``main.js``) to the first stylesheet
        imported by it. During development only style entries get a tag, the
        dev server injects styles imported from scripts itself.
        """
        if self.is_dev():
            if not is_style_entry(entry):
                return None
            return self._html_tag_service.style_tag(self._asset_dev(entry), attributes)

        if is_style_entry(entry):
            file = self._vite_manifest_service.get_property(entry, "file", allow_missing)
        else:
            css = self._vite_manifest_service.get_property(entry, "css", allow_missing)
            file = css[0] if isinstance(css, list) and css else None
        if not file:
            return None

        return self._html_tag_service.style_tag(self._asset_prod(file), attributes)

    def _file(self, entry: str, allow_missing: bool, dev: bool) -> Optional[str]:
        if dev:
            return self._asset_dev(entry)

        file = self._vite_manifest_service.get_property(entry, "file", allow_missing)
        return self._asset_prod(file) if file else None

    def _client(self, dev: bool) -> Optional[Markup]:
        if not dev:
            return None
        return self._html_tag_service.script_tag(
            self._asset_dev(DEV_CLIENT_ENTRY), {"type": "module"}
        )

    def _legacy_polyfills(
        self, attributes: Optional[Attributes], dev: bool
    ) -> Optional[Markup]:
        if dev:
            return None

        # The polyfills entry is relative to vite's root (for example
        # `../vite/legacy-polyfills-legacy`) and only exists if any polyfills
        # are used.
        entry = next(
            (
                key
                for key in self._vite_manifest_service.get_manifest()
                if key.endswith(LEGACY_POLYFILLS_SUFFIX)
            ),
            None,
        )
        if entry is None:
            return None

        file = self._file(entry, True, dev)
        if file is None:
            logger.warning("Legacy polyfills entry %s has no file", entry)
            return None
        return self._html_tag_service.script_tag(
            file, {"nomodule": True, **(attributes or {})}
        )

    def _legacy_script(
        self,
        entry: str,
        attributes: Optional[Attributes],
        allow_missing: bool,
        dev: bool,
    ) -> Optional[Markup]:
        if dev:
            return None

        file = self._file(legacy_entry(entry), allow_missing, dev)
        if file is None:
            return None
        return self._html_tag_service.script_tag(
            file, {"nomodule": True, **(attributes or {})}
        )

    def _asset_dev(self, file: str) -> str:
        return f"{self._dev_mode_probe.server_origin()}/{file}"

    def _asset_prod(self, file: str) -> str:
        return url_join(self._output_path_resolver.relative_out_dir(), file)
