"""
Lazy-initialised wiring of the default dimension content pipeline.

:class:`ContentContainer` holds the registration lists (mergers,
normalizers, data mappers, property resolvers, resolvers, resource
loaders) and creates every component on first access from
:class:`~dimcontent.core.settings.DimContentSettings`.

Usage::

    from dimcontent.container import ContentContainer

    container = ContentContainer()
    container.create_schema()
    container.pages.add(page)
    data = container.content_resolver.resolve(dimension_content)

    # Or as a context manager for automatic cleanup:
    with ContentContainer(get_settings()) as c:
        c.route_repository.find_by(locale="en")

Architecture:
    ::

        ContentContainer
        ├── settings                 DimContentSettings
        ├── engine / session         SQLAlchemy, routes table
        ├── route_repository         RouteRepository + RouteChangedUpdater
        ├── route_history_defaults_provider  redirects of history routes
        ├── form_metadata_loader     YAML forms below templates_dir
        ├── request_context          scheme, host, ports, site
        ├── content_merger           default_mergers()
        ├── content_aggregator
        ├── content_normalizer       default_normalizers()
        ├── content_data_mapper      template, route, excerpt, seo, navigation
        ├── property_resolver_provider
        │     default · block · smart_content · page/snippet selections
        ├── resource_loader_provider Cached(ContentResourceLoader) per repository
        ├── smart_resolver_provider  smart_content
        └── content_resolver         max_depth from settings

Tags:
    container, wiring, dependency-injection, dimcontent
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from dimcontent.aggregator import ContentAggregator
from dimcontent.core.logging import get_logger
from dimcontent.core.orm import DimContentBase, create_dimcontent_engine, dimcontent_session_factory
from dimcontent.core.settings import DimContentSettings, get_settings
from dimcontent.datamapper import (
    ContentDataMapper,
    ExcerptDataMapper,
    NavigationContextDataMapper,
    RoutableDataMapper,
    SeoDataMapper,
    TemplateDataMapper,
)
from dimcontent.domain import InMemoryContentRepository, Page, Snippet
from dimcontent.httpcache import ReferenceStore
from dimcontent.importer import ContentImporter
from dimcontent.merger import ContentMerger, default_mergers
from dimcontent.metadata import FormMetadataLoader
from dimcontent.normalizer import ContentNormalizer, default_normalizers
from dimcontent.properties import (
    BlockPropertyResolver,
    BlockVisitorChain,
    DefaultPropertyResolver,
    HiddenBlockVisitor,
    MetadataResolver,
    PropertyResolverProvider,
    SegmentBlockVisitor,
    SegmentSmartContentFiltersVisitor,
    SelectionPropertyResolver,
    SingleSelectionPropertyResolver,
    SmartContentPropertyResolver,
    TargetGroupBlockVisitor,
)
from dimcontent.resolver import (
    ContentResolver,
    ContentViewDataNormalizer,
    ContentViewResolver,
    DimensionContentResolver,
    ExcerptResolver,
    ResolvableResourceLoader,
    ResolvableResourceQueueProcessor,
    ResolvableResourceReplacer,
    Resolver,
    SeoResolver,
    SettingsResolver,
    TemplateResolver,
)
from dimcontent.resources import (
    CachedResourceLoader,
    ContentResourceLoader,
    ResourceLoaderProvider,
    SmartContentProvider,
    SmartContentSmartResolver,
    SmartResolverProvider,
)
from dimcontent.routing import (
    LocalePrefixSiteRouteGenerator,
    PathCleanup,
    RequestContext,
    ResourceLocatorGenerator,
    RouteGenerator,
    RouteHistoryDefaultsProvider,
    RouteRepository,
)
from dimcontent.routing.generator import DEFAULT_SITE_GENERATOR, SITE_PARAMETER

logger = get_logger(__name__)


class ContentContainer:
    """Lazy-initialised dependency container.

    Components are created on first property access and disposed via
    :meth:`close` (or the context-manager protocol).
    """

    def __init__(
        self,
        settings: DimContentSettings | None = None,
        *,
        smart_content_providers: Mapping[str, SmartContentProvider] | None = None,
    ) -> None:
        self._settings = settings
        self._smart_content_providers = dict(smart_content_providers or {})
        self._engine: Engine | None = None
        self._session: Session | None = None
        self._route_repository: RouteRepository | None = None
        self._form_metadata_loader: FormMetadataLoader | None = None
        self._request_context: RequestContext | None = None
        self._route_generator: RouteGenerator | None = None
        self._resource_locator_generator: ResourceLocatorGenerator | None = None
        self._reference_store: ReferenceStore | None = None
        self._repositories: dict[str, InMemoryContentRepository] | None = None
        self._content_merger: ContentMerger | None = None
        self._content_aggregator: ContentAggregator | None = None
        self._content_normalizer: ContentNormalizer | None = None
        self._content_data_mapper: ContentDataMapper | None = None
        self._property_resolver_provider: PropertyResolverProvider | None = None
        self._metadata_resolver: MetadataResolver | None = None
        self._resource_loader_provider: ResourceLoaderProvider | None = None
        self._smart_resolver_provider: SmartResolverProvider | None = None
        self._content_resolver: ContentResolver | None = None

    # ── Settings & storage ───────────────────────────────────────

    @property
    def settings(self) -> DimContentSettings:
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def engine(self) -> Engine:
        """SQLAlchemy :class:`~sqlalchemy.engine.Engine` of the route store."""
        if self._engine is None:
            self._engine = create_dimcontent_engine(
                self.settings.database_url, echo=self.settings.database_echo
            )
        return self._engine

    @property
    def session(self) -> Session:
        if self._session is None:
            self._session = dimcontent_session_factory(self.engine)()
        return self._session

    def create_schema(self) -> None:
        """Create the routes table when it does not exist yet."""
        DimContentBase.metadata.create_all(self.engine)
        logger.debug("schema_created", url=self.engine.url.render_as_string(hide_password=True))

    @property
    def route_repository(self) -> RouteRepository:
        if self._route_repository is None:
            self._route_repository = RouteRepository(self.session)
        return self._route_repository

    @property
    def form_metadata_loader(self) -> FormMetadataLoader:
        if self._form_metadata_loader is None:
            self._form_metadata_loader = FormMetadataLoader(self.settings.templates_dir)
        return self._form_metadata_loader

    @property
    def repositories(self) -> dict[str, InMemoryContentRepository]:
        """Content repositories by resource key; one resource loader is registered per entry."""
        if self._repositories is None:
            self._repositories = {
                Page.resource_key: InMemoryContentRepository(Page.resource_key),
                Snippet.resource_key: InMemoryContentRepository(Snippet.resource_key),
            }
        return self._repositories

    @property
    def pages(self) -> InMemoryContentRepository:
        return self.repositories[Page.resource_key]

    @property
    def snippets(self) -> InMemoryContentRepository:
        return self.repositories[Snippet.resource_key]

    # ── Routing ──────────────────────────────────────────────────

    @property
    def request_context(self) -> RequestContext:
        if self._request_context is None:
            settings = self.settings
            self._request_context = RequestContext(
                scheme=settings.scheme,
                host=settings.host,
                http_port=settings.http_port,
                https_port=settings.https_port,
            )
            if settings.default_site:
                self._request_context.set_parameter(SITE_PARAMETER, settings.default_site)
        return self._request_context

    @property
    def route_generator(self) -> RouteGenerator:
        if self._route_generator is None:
            self._route_generator = RouteGenerator(
                {DEFAULT_SITE_GENERATOR: LocalePrefixSiteRouteGenerator()},
                self.request_context,
            )
        return self._route_generator

    @property
    def resource_locator_generator(self) -> ResourceLocatorGenerator:
        if self._resource_locator_generator is None:
            self._resource_locator_generator = ResourceLocatorGenerator(
                self.route_repository, PathCleanup()
            )
        return self._resource_locator_generator

    @property
    def route_history_defaults_provider(self) -> RouteHistoryDefaultsProvider:
        return RouteHistoryDefaultsProvider(self.route_repository, self.route_generator)

    @property
    def reference_store(self) -> ReferenceStore:
        if self._reference_store is None:
            self._reference_store = ReferenceStore()
        return self._reference_store

    # ── Dimension pipelines ──────────────────────────────────────

    @property
    def content_merger(self) -> ContentMerger:
        if self._content_merger is None:
            self._content_merger = ContentMerger(default_mergers())
        return self._content_merger

    @property
    def content_aggregator(self) -> ContentAggregator:
        if self._content_aggregator is None:
            self._content_aggregator = ContentAggregator(self.content_merger)
        return self._content_aggregator

    @property
    def content_normalizer(self) -> ContentNormalizer:
        if self._content_normalizer is None:
            self._content_normalizer = ContentNormalizer(default_normalizers())
        return self._content_normalizer

    @property
    def content_data_mapper(self) -> ContentDataMapper:
        if self._content_data_mapper is None:
            # Templates first, the route mapper reads the template key
            self._content_data_mapper = ContentDataMapper(
                [
                    TemplateDataMapper(self.form_metadata_loader),
                    RoutableDataMapper(self.route_repository, self.form_metadata_loader),
                    ExcerptDataMapper(),
                    SeoDataMapper(),
                    NavigationContextDataMapper(),
                ]
            )
        return self._content_data_mapper

    @property
    def content_importer(self) -> ContentImporter:
        return ContentImporter(self.content_data_mapper, self.repositories, self.route_repository)

    # ── Resolution ───────────────────────────────────────────────

    def _build_property_resolvers(self) -> None:
        request_context = self.request_context
        block_visitor_chain = BlockVisitorChain(
            [
                HiddenBlockVisitor(),
                SegmentBlockVisitor(request_context),
                TargetGroupBlockVisitor(request_context),
            ]
        )
        block_resolver = BlockPropertyResolver(
            self.form_metadata_loader,
            block_visitor_chain,
            debug=self.settings.debug,
        )
        provider = PropertyResolverProvider(
            [
                DefaultPropertyResolver(),
                block_resolver,
                SmartContentPropertyResolver(
                    request_context, [SegmentSmartContentFiltersVisitor(request_context)]
                ),
                SelectionPropertyResolver("page_selection", Page.resource_key, Page.resource_key),
                SingleSelectionPropertyResolver(
                    "single_page_selection", Page.resource_key, Page.resource_key
                ),
                SelectionPropertyResolver(
                    "snippet_selection", Snippet.resource_key, Snippet.resource_key
                ),
                SingleSelectionPropertyResolver(
                    "single_snippet_selection", Snippet.resource_key, Snippet.resource_key
                ),
            ]
        )
        # Blocks resolve their nested fields through the metadata resolver
        self._metadata_resolver = MetadataResolver(provider)
        block_resolver.set_metadata_resolver(self._metadata_resolver)
        self._property_resolver_provider = provider

    @property
    def property_resolver_provider(self) -> PropertyResolverProvider:
        if self._property_resolver_provider is None:
            self._build_property_resolvers()
        return self._property_resolver_provider

    @property
    def metadata_resolver(self) -> MetadataResolver:
        if self._metadata_resolver is None:
            self._build_property_resolvers()
        return self._metadata_resolver

    @property
    def content_resolvers(self) -> dict[str, Resolver]:
        """Resolvers in the order their content views are built."""
        return {
            "dimension_content": DimensionContentResolver(),
            "template": TemplateResolver(self.form_metadata_loader, self.metadata_resolver),
            "excerpt": ExcerptResolver(self.form_metadata_loader, self.metadata_resolver),
            "seo": SeoResolver(self.form_metadata_loader, self.metadata_resolver),
            "settings": SettingsResolver(self.route_generator, self.route_repository),
        }

    @property
    def resource_loader_provider(self) -> ResourceLoaderProvider:
        if self._resource_loader_provider is None:
            self._resource_loader_provider = ResourceLoaderProvider(
                CachedResourceLoader(ContentResourceLoader(repository, key))
                for key, repository in self.repositories.items()
            )
        return self._resource_loader_provider

    @property
    def smart_resolver_provider(self) -> SmartResolverProvider:
        if self._smart_resolver_provider is None:
            self._smart_resolver_provider = SmartResolverProvider(
                [SmartContentSmartResolver(self._smart_content_providers)]
            )
        return self._smart_resolver_provider

    @property
    def content_resolver(self) -> ContentResolver:
        if self._content_resolver is None:
            queue_processor = ResolvableResourceQueueProcessor()
            self._content_resolver = ContentResolver(
                ContentViewResolver(queue_processor, self.content_resolvers),
                ResolvableResourceLoader(self.resource_loader_provider, self.smart_resolver_provider),
                queue_processor,
                ResolvableResourceReplacer(self.reference_store),
                ContentViewDataNormalizer(),
                self.content_aggregator,
                self.settings.max_depth,
            )
        return self._content_resolver

    # ── Lifecycle ────────────────────────────────────────────────

    def reset(self) -> None:
        """Forget per-request state: collected references and cached resources."""
        if self._reference_store is not None:
            self._reference_store.reset()
        if self._resource_loader_provider is not None:
            for key in self._resource_loader_provider.list_keys():
                loader: Any = self._resource_loader_provider.get(key)
                if isinstance(loader, CachedResourceLoader):
                    loader.reset()

    def close(self) -> None:
        """Dispose of managed resources."""
        if self._session is not None:
            self._session.close()
            self._session = None
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None

    def __enter__(self) -> ContentContainer:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


__all__ = ["ContentContainer"]
