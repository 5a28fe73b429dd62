import json
import logging
import os
import threading
from typing import Dict, Any, List, Optional, Union

from vite_assets.exceptions.vite_exceptions import (
    ManifestCorrupt,
    ManifestMissing,
    MissingManifestEntry,
    MissingManifestProperty,
)
from vite_assets.misc.utils import file_content
from vite_assets.models.enums import StrictnessPolicy
from vite_assets.models.roots import Roots
from vite_assets.services.output_path_resolver import OutputPathResolver

logger = logging.getLogger(__name__)

Manifest = Dict[str, Dict[str, Any]]

MANIFEST_LOCATIONS = (
    os.path.join(".vite", "manifest.json"),
    "manifest.json",
)


class ViteManifestService:
    def __init__(
        self,
        roots: Roots,
        output_path_resolver: OutputPathResolver,
        strictness: StrictnessPolicy,
    ):
        self._roots = roots
        self._output_path_resolver = output_path_resolver
        self._strictness = strictness
        self._manifest: Optional[Manifest] = None
        self._lock = threading.Lock()

    def manifest_paths(self) -> List[str]:
        out_dir = os.path.join(
            self._roots.index, self._output_path_resolver.relative_out_dir()
        )
        return [os.path.join(out_dir, location) for location in MANIFEST_LOCATIONS]

    def get_manifest(self) -> Manifest:
        if self._manifest is None:
            with self._lock:
                if self._manifest is None:
                    self._manifest = self._load()
        return self._manifest

    def _load(self) -> Manifest:
        manifest_paths = self.manifest_paths()
        for manifest_path in manifest_paths:
            try:
                content = file_content(manifest_path)
            except UnicodeDecodeError as decode_error:
                raise ManifestCorrupt(manifest_path, str(decode_error)) from decode_error
            if content is not None:
                return self._parse(manifest_path, content)

        if self._strictness.raises():
            raise ManifestMissing(manifest_paths)
        logger.warning(
            "No vite manifest found in %s, assets will not be included",
            ", ".join(manifest_paths),
        )
        return {}

    @staticmethod
    def _parse(manifest_path: str, content: str) -> Manifest:
        try:
            manifest = json.loads(content)
        except json.JSONDecodeError as decode_error:
            raise ManifestCorrupt(manifest_path, str(decode_error)) from decode_error
        if not isinstance(manifest, dict):
            raise ManifestCorrupt(
                manifest_path, f"expected a JSON object, got {type(manifest).__name__}"
            )
        logger.debug("Loaded %d entries from %s", len(manifest), manifest_path)
        return manifest

    def get_property(
        self, entry: str, key: str = "file", allow_missing: bool = False
    ) -> Union[str, List[str], None]:
        try:
            manifest = self.get_manifest()
        except ManifestMissing:
            if allow_missing:
                return None
            raise

        manifest_entry = manifest.get(entry)
        if not manifest_entry or not isinstance(manifest_entry, dict):
            if self._strictness.raises(allow_missing):
                raise MissingManifestEntry(entry)
            return None

        value = manifest_entry.get(key)
        if not value:
            if self._strictness.raises(allow_missing):
                raise MissingManifestProperty(entry, key)
            return None

        return value

