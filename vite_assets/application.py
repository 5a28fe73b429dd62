# pylint: disable=c-extension-no-member
import logging
import os
from configparser import ConfigParser
from typing import Type, Union, Callable, Tuple, List

import uvicorn
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from vite_assets.dependency_injection.config import get_config
from vite_assets.dependency_injection.container import Container
from vite_assets.exceptions.vite_exception_handlers import vite_exception_handler
from vite_assets.exceptions.vite_exceptions import ViteBaseException
from vite_assets.routers.misc_router import misc_router

TEMPLATES_PATH = os.path.join(os.path.dirname(__file__), "templates")

_exception_handlers: List[Tuple[Union[int, Type[Exception]], Callable]] = [
    (ViteBaseException, vite_exception_handler),
]


def kwargs_from_config():
    config = get_config()

    kwargs = {
        "host": config.get("uvicorn", "host"),
        "port": config.getint("uvicorn", "port"),
        "reload": config.getboolean("uvicorn", "reload"),
        "proxy_headers": True,
        "workers": config.getint("uvicorn", "workers"),
    }

    reload_includes = config.get("uvicorn", "reload_includes", fallback=None)
    if reload_includes is not None and reload_includes != "":
        kwargs["reload_includes"] = reload_includes.split(" ")
    return kwargs


def _add_exception_handlers(fastapi: FastAPI):
    for tup in _exception_handlers:
        fastapi.add_exception_handler(tup[0], tup[1])


def run():
    uvicorn.run(
        "vite_assets.application:create_fastapi_app", factory=True, **kwargs_from_config()
    )


def create_fastapi_app(
    config: Union[ConfigParser, None] = None, container: Union[Container, None] = None
) -> FastAPI:
    container = container if container is not None else Container()
    _config: ConfigParser = config if config is not None else get_config()
    configured_loglevel = _config.get("app", "loglevel", fallback="info")
    loglevel = logging.getLevelName(configured_loglevel.upper())

    if isinstance(loglevel, str):
        raise ValueError(f"Invalid loglevel {configured_loglevel.upper()}")
    logging.basicConfig(
        level=loglevel,
        datefmt="%m/%d/%Y %I:%M:%S %p",
    )

    if not _config.has_section("templates"):
        _config.add_section("templates")
    if not _config.get("templates", "jinja_path", fallback=None):
        _config.set("templates", "jinja_path", TEMPLATES_PATH)

    modules = [
        "vite_assets.routers.misc_router",
    ]
    container.config.from_dict(
        {section: dict(_config[section]) for section in _config.sections()}
    )
    container.wire(modules=modules)

    fastapi = FastAPI(docs_url=None, redoc_url=None, openapi_url=None)
    fastapi.include_router(misc_router)

    if _config.getboolean("app", "serve_static", fallback=False):
        fastapi.mount(
            "/",
            StaticFiles(directory=_config.get("roots", "index"), check_dir=False),
            name="static",
        )

    fastapi.container = container  # type: ignore
    _add_exception_handlers(fastapi)
    return fastapi
