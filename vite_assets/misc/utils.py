import os
from os import path
from typing import Union, Optional

STYLE_EXTENSIONS = ("css", "scss", "sass", "less", "styl", "stylus")


def file_content(filepath: str) -> Union[str, None]:
    if filepath is not None and path.exists(filepath):
        with open(filepath, "r", encoding="utf-8") as file:
            return file.read()
    return None


def as_bool(input_str: Union[str, bool, None]) -> bool:
    if isinstance(input_str, bool):
        return input_str
    return input_str is not None and input_str.lower() == "true"


def file_extension(filename: str) -> str:
    return os.path.splitext(filename)[1].lstrip(".").lower()


def is_style_entry(entry: str) -> bool:
    return file_extension(entry) in STYLE_EXTENSIONS


def canonical_path(filepath: str) -> str:
    return os.path.realpath(os.path.normpath(filepath))


def get_relative_path(root_path: str, full_path: str) -> Optional[str]:
    """
    Express ``full_path`` relative to ``root_path`` after resolving both to
    canonical absolute paths. Returns None when ``full_path`` is not located
    inside (or equal to) ``root_path``.
    """
    root = canonical_path(root_path)
    full = canonical_path(full_path)

    if full == root:
        return ""
    prefix = root if root.endswith(os.sep) else root + os.sep
    if full.startswith(prefix):
        return full[len(prefix) :].strip(os.sep).replace(os.sep, "/")
    return None


def url_join(*parts: str) -> str:
    return "/" + "/".join(part.strip("/") for part in parts if part.strip("/"))
