"""Dependency injection container for the application."""
from dependency_injector import containers, providers
import requests

from linkprobe import config as env
from linkprobe.services.checker import LinkChecker
from linkprobe.services.fetcher import LinkFetcher
from linkprobe.services.http_service import HttpService
from linkprobe.services.link_extractor import HtmlLinkExtractor
from linkprobe.services.local_server import LocalStaticServer


# Environment variables used by the container (read via `linkprobe.config` helpers).
#
# LINKPROBE_USER_AGENT (str, default: "linkprobe/0.1")
#   User-Agent header for outbound HEAD/GET requests.
#
# LINKPROBE_HTTP_TIMEOUT (float seconds, default: 10)
#   Per-request timeout. The crawl itself has no overall timeout.
ENV = {
    "USER_AGENT": env.get_str_env("LINKPROBE_USER_AGENT", "linkprobe/0.1"),
    "HTTP_TIMEOUT": env.get_float_env("LINKPROBE_HTTP_TIMEOUT", 10.0),
}


class Container(containers.DeclarativeContainer):
    """Dependency injection container for linkprobe."""

    config = providers.Configuration(default=ENV)

    http_service = providers.Singleton(
        HttpService,
        user_agent=config.USER_AGENT.as_(str),
        http_client=providers.Object(requests.request),
        timeout=config.HTTP_TIMEOUT.as_(float),
    )

    link_fetcher = providers.Singleton(
        LinkFetcher,
        http_service=http_service,
    )

    link_extractor = providers.Singleton(
        HtmlLinkExtractor
    )

    link_checker = providers.Factory(
        LinkChecker,
        fetcher=link_fetcher,
        link_extractor=link_extractor,
        server_factory=providers.Object(LocalStaticServer),
    )
