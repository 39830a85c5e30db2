"""src/urlconstructor/__init__.py

urlconstructor - Fluent URL string builder for Python.

urlconstructor composes a URL from separately supplied components (scheme,
userinfo, subdomains, host, port, path segments, query parameters and
fragment). It performs no parsing, validation or percent-encoding: components
are joined with their delimiters exactly as given.

Key Features:
    - Zero external dependencies
    - Chainable setters
    - Call order preserved for subdomains, path segments and query parameters
    - Full type hints (PEP 561)
    - Memory optimized with __slots__

Example:
    Basic usage::

        from urlconstructor import UrlConstructor

        url = (
            UrlConstructor()
            .subdomain("api")
            .host("example.com")
            .subdir("v1")
            .subdir("users")
            .param("page", "2")
            .build()
        )
        # https://api.example.com/v1/users?page=2

    Without a scheme::

        UrlConstructor().scheme("").host("example.com").build()
        # example.com
"""

from urlconstructor.builder import DEFAULT_SCHEME, UrlConstructor
from urlconstructor.version import __version__

__all__ = [
    "UrlConstructor",
    "DEFAULT_SCHEME",
    "__version__",
]
