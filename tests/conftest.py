import pytest

from urlconstructor import UrlConstructor


@pytest.fixture
def full_builder():
    """Fixture providing a builder with every component set."""
    return (
        UrlConstructor()
        .scheme("http")
        .userinfo("user:password")
        .subdomain("api")
        .subdomain("v2")
        .host("google.com")
        .port(400)
        .subdir("s1")
        .subdir("s2")
        .param("k1", "v1")
        .param("k2", "v2")
        .param("k3", "v4")
        .fragment("foo")
    )
