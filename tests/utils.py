import json
import os
from typing import Any, Dict


def write_json(filepath: str, content: Any) -> str:
    os.makedirs(os.path.dirname(filepath), exist_ok=True)
    with open(filepath, "w", encoding="utf-8") as file:
        json.dump(content, file)
    return filepath


def write_text(filepath: str, content: str) -> str:
    os.makedirs(os.path.dirname(filepath), exist_ok=True)
    with open(filepath, "w", encoding="utf-8") as file:
        file.write(content)
    return filepath


def write_build_config(config_root: str, out_dir: str, legacy: bool = False) -> str:
    return write_json(
        os.path.join(config_root, "vite.config.json"),
        {"outDir": out_dir, "legacy": legacy},
    )


def write_manifest(out_dir: str, manifest: Dict[str, Any], legacy_layout=False) -> str:
    if legacy_layout:
        return write_json(os.path.join(out_dir, "manifest.json"), manifest)
    return write_json(os.path.join(out_dir, ".vite", "manifest.json"), manifest)


def write_dev_file(root: str, origin: str = "http://localhost:5173") -> str:
    return write_text(os.path.join(root, ".dev"), f"VITE_SERVER={origin}\n")


sample_manifest = {
    "src/main.js": {
        "file": "assets/main-4ed993c7.js",
        "src": "src/main.js",
        "isEntry": True,
        "css": ["assets/main-a3b2c1d0.css", "assets/vendor-0f1e2d3c.css"],
    },
    "src/main-legacy.js": {
        "file": "assets/main-legacy-9b8a7c6d.js",
        "src": "src/main-legacy.js",
        "isEntry": True,
    },
    "../vite/legacy-polyfills-legacy": {
        "file": "assets/polyfills-legacy-1a2b3c4d.js",
        "src": "../vite/legacy-polyfills-legacy",
        "isEntry": True,
    },
    "src/styles/app.scss": {
        "file": "assets/app-OH0OBLf7.css",
        "src": "src/styles/app.scss",
        "isEntry": True,
    },
    "src/no-styles.js": {
        "file": "assets/no-styles-XyZ123.js",
        "src": "src/no-styles.js",
        "isEntry": True,
    },
}


def write_bytes(filepath: str, content: bytes) -> str:
    os.makedirs(os.path.dirname(filepath), exist_ok=True)
    with open(filepath, "wb") as file:
        file.write(content)
    return filepath
