import pytest

from vite_assets.application import create_fastapi_app
from tests.utils import write_manifest, sample_manifest


@pytest.mark.usefixtures("build_config")
def test_index_production(create_client, dist_dir):
    write_manifest(dist_dir, sample_manifest)
    client = create_client()

    response = client.get("/")

    assert response.status_code == 200
    assert (
        '<link rel="stylesheet" href="/dist/assets/main-a3b2c1d0.css">' in response.text
    )
    assert (
        '<script src="/dist/assets/main-4ed993c7.js" type="module"></script>'
        in response.text
    )


@pytest.mark.usefixtures("legacy_build_config")
def test_index_legacy_polyfills_on_every_page(create_client, dist_dir):
    write_manifest(dist_dir, sample_manifest)
    client = create_client()

    first = client.get("/")
    second = client.get("/")

    assert first.text.count("polyfills-legacy-1a2b3c4d.js") == 1
    assert second.text.count("polyfills-legacy-1a2b3c4d.js") == 1


@pytest.mark.usefixtures("build_config", "dev_server")
def test_index_dev(create_client):
    client = create_client()

    response = client.get("/")

    assert response.status_code == 200
    assert "http://localhost:5173/@vite/client" in response.text
    assert "http://localhost:5173/src/main.js" in response.text
    assert "stylesheet" not in response.text


@pytest.mark.usefixtures("build_config")
def test_index_missing_manifest_in_debug(create_client):
    client = create_client()

    response = client.get("/")

    assert response.status_code == 500
    assert response.json() == {
        "error": "server_error",
        "error_description": "`manifest.json` not found.",
    }


@pytest.mark.usefixtures("build_config")
def test_health(create_client, dist_dir):
    write_manifest(dist_dir, sample_manifest)
    client = create_client()

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {
        "healthy": True,
        "mode": "production",
        "results": [
            {"healthy": True, "service": "manifest", "entries": len(sample_manifest)}
        ],
    }


@pytest.mark.usefixtures("build_config")
def test_health_missing_manifest(create_client):
    client = create_client()

    response = client.get("/health")

    assert response.status_code == 500
    assert response.json()["healthy"] is False


@pytest.mark.usefixtures("build_config", "dev_server")
def test_health_dev(create_client):
    response = create_client().get("/health")

    assert response.status_code == 200
    assert response.json()["mode"] == "dev"


def test_invalid_loglevel(config):
    config["app"]["loglevel"] = "loud"

    with pytest.raises(ValueError, match="Invalid loglevel LOUD"):
        create_fastapi_app(config)
