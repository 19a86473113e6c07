"""
Url generation for slugs.

Each site registers a :class:`SiteRouteGenerator` that knows how its urls
look (with locale prefix, on which host, ...). :class:`RouteGenerator`
picks the generator for the site, falling back to the ``.default`` one,
and turns absolute urls on the current host into paths.

Examples:
    >>> context = RequestContext(scheme="https", host="example.org")
    >>> generator = RouteGenerator({".default": LocalePrefixSiteRouteGenerator()}, context)
    >>> generator.generate("/hello", "en", "website")
    '/en/hello'

Tags:
    routing, url, generator, dimcontent
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

from dimcontent.core.errors import MissingRequestContextError, RoutingError

SITE_PARAMETER = "site"
LOCALE_PARAMETER = "_locale"
DEFAULT_SITE_GENERATOR = ".default"


@dataclass
class RequestContext:
    """Scheme, host, ports and parameters of the current request."""

    scheme: str = "http"
    host: str = "localhost"
    http_port: int = 80
    https_port: int = 443
    parameters: dict[str, Any] = field(default_factory=dict)
    query: dict[str, str] = field(default_factory=dict)

    def get_parameter(self, name: str) -> Any:
        return self.parameters.get(name)

    def set_parameter(self, name: str, value: Any) -> None:
        self.parameters[name] = value

    def get_query(self, name: str, default: str = "") -> str:
        return str(self.query.get(name, default))

    @property
    def port_suffix(self) -> str:
        if self.scheme == "http":
            return f":{self.http_port}" if self.http_port != 80 else ""
        if self.scheme == "https":
            return f":{self.https_port}" if self.https_port != 443 else ""
        raise RoutingError(f"Invalid scheme: {self.scheme}")

    @property
    def scheme_and_host(self) -> str:
        return f"{self.scheme}://{self.host}{self.port_suffix}"


@runtime_checkable
class SiteRouteGenerator(Protocol):
    def generate(self, request_context: RequestContext, slug: str, locale: str) -> str:
        ...


class LocalePrefixSiteRouteGenerator:
    """Generates ``<scheme>://<host>[:port]/<locale><slug>`` on the request host."""

    def generate(self, request_context: RequestContext, slug: str, locale: str) -> str:
        return f"{request_context.scheme_and_host}/{locale}{slug}"


class RouteGenerator:
    def __init__(
        self,
        site_route_generators: Mapping[str, SiteRouteGenerator],
        request_context: RequestContext,
    ) -> None:
        self._site_route_generators = dict(site_route_generators)
        self._request_context = request_context

    @property
    def request_context(self) -> RequestContext:
        return self._request_context

    def generate(self, slug: str, locale: str | None = None, site: str | None = None) -> str:
        if site is None:
            site = self._request_context.get_parameter(SITE_PARAMETER)
            if not isinstance(site, str):
                raise MissingRequestContextError(SITE_PARAMETER)

        if locale is None:
            locale = self._request_context.get_parameter(LOCALE_PARAMETER)
            if not isinstance(locale, str):
                raise MissingRequestContextError(LOCALE_PARAMETER)

        site_route_generator = self._site_route_generators.get(
            site, self._site_route_generators.get(DEFAULT_SITE_GENERATOR)
        )
        if site_route_generator is None:
            raise RoutingError(f'No site route generator registered for site "{site}"')

        generated_url = site_route_generator.generate(self._request_context, slug, locale)

        prefix = self._request_context.scheme_and_host + "/"
        if generated_url.startswith(prefix):
            return generated_url[len(prefix) - 1 :]

        return generated_url


__all__ = [
    "DEFAULT_SITE_GENERATOR",
    "LOCALE_PARAMETER",
    "LocalePrefixSiteRouteGenerator",
    "RequestContext",
    "RouteGenerator",
    "SITE_PARAMETER",
    "SiteRouteGenerator",
]
