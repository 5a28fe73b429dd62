import abc
from typing import Union


class ViteBaseException(Exception, abc.ABC):
    def __init__(
        self,
        *,
        error_description: str,
        log_message: Union[str, None] = None,
    ):
        super().__init__(error_description if log_message is None else log_message)
        self.error_description = error_description
        self.log_message = log_message


class ConfigError(ViteBaseException):
    def __init__(self, *, error_description: str, log_message: Union[str, None] = None):
        super().__init__(error_description=error_description, log_message=log_message)


class ManifestMissing(ViteBaseException):
    def __init__(self, manifest_paths):
        super().__init__(
            error_description="`manifest.json` not found.",
            log_message=f"`manifest.json` not found, looked in: {', '.join(manifest_paths)}",
        )
        self.manifest_paths = list(manifest_paths)


class ManifestCorrupt(ViteBaseException):
    """
    Raised for unreadable build output. Never gated by ``allow_missing`` or
    the strictness policy.
    """

    def __init__(self, manifest_path: str, reason: str):
        super().__init__(
            error_description="`manifest.json` could not be parsed.",
            log_message=f"`{manifest_path}` could not be parsed: {reason}",
        )
        self.manifest_path = manifest_path


class MissingManifestEntry(ViteBaseException):
    def __init__(self, entry: str):
        super().__init__(error_description=f"`{entry}` is not a manifest entry.")
        self.entry = entry


class MissingManifestProperty(ViteBaseException):
    def __init__(self, entry: str, key: str):
        super().__init__(
            error_description=f"`{key}` not found in manifest entry `{entry}`"
        )
        self.entry = entry
        self.key = key
