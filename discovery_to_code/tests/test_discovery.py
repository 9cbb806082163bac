import pytest

from discovery_to_code.discovery import DiscoveryError, DiscoveryService


def test_from_dict():
    doc = {"name": "books", "version": "v1", "title": "Books API", "basePath": "/books/v1/"}
    service = DiscoveryService.from_dict(doc)

    assert service.name == "books"
    assert service.version == "v1"
    assert service.title == "Books API"
    assert service.base_path == "/books/v1/"
    assert service.description == ""
    assert service.raw is doc


@pytest.mark.parametrize("doc", [{}, {"name": ""}, {"name": "   "}, {"name": 3}, ["books"], {"name": "!!!"}, {"name": "3dmodels"}])
def test_invalid_documents(doc):
    with pytest.raises(DiscoveryError):
        DiscoveryService.from_dict(doc)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("books", "Books"),
        ("url-shortener", "UrlShortener"),
        ("cloud_storage", "CloudStorage"),
        ("adSense", "AdSense"),
        ("latitude2", "Latitude2"),
    ],
)
def test_class_name(name, expected):
    assert DiscoveryService(name=name).class_name == expected
