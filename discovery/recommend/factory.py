"""
Factory for recommendation modules.

Each function takes the service registry and returns a new module instance.
"""

from ..exceptions import ConfigurationError
from ..services.service_registry import ServiceRegistry
from .external import AuthorInfo, DPLATerms, EuropeanaResults, WorldCatIdentities
from .facets import (
    AuthorFacets,
    CollectionSideFacets,
    ExpandFacets,
    FavoriteFacets,
    SideFacets,
    TopFacets,
    VisualFacets,
)
from .query import MapSelection, SwitchQuery
from .results import (
    AuthorityRecommend,
    CatalogResults,
    RandomRecommend,
    SummonResults,
    WebResults,
)
from .summon import SummonBestBets, SummonDatabases, SummonTopics


def _main_config(registry: ServiceRegistry):
    return registry.get("config_manager").get("config")


def get_author_facets(registry: ServiceRegistry) -> AuthorFacets:
    return AuthorFacets(registry.get("search.results_manager"))


def get_author_info(registry: ServiceRegistry) -> AuthorInfo:
    """Construct the AuthorInfo module; sources come from ``[Content] authors``."""
    return AuthorInfo(
        registry.get("search.results_manager"),
        registry.get("http").create_client(),
        _main_config(registry).section("Content").get("authors", ""),
    )


def get_authority_recommend(registry: ServiceRegistry) -> AuthorityRecommend:
    return AuthorityRecommend(registry.get("search.results_manager"))


def get_catalog_results(registry: ServiceRegistry) -> CatalogResults:
    return CatalogResults(registry.get("search.runner"))


def get_collection_side_facets(registry: ServiceRegistry) -> CollectionSideFacets:
    return CollectionSideFacets(
        registry.get("config_manager"), registry.get("search.facet_helper")
    )


def get_dpla_terms(registry: ServiceRegistry) -> DPLATerms:
    """
    Construct the DPLATerms module.

    Raises:
        ConfigurationError: If ``[DPLA] apiKey`` is not configured
    """
    dpla = _main_config(registry).section("DPLA")
    if "apiKey" not in dpla:
        raise ConfigurationError("DPLA API key missing from configuration.")
    return DPLATerms(dpla["apiKey"], registry.get("http").create_client())


def get_europeana_results(registry: ServiceRegistry) -> EuropeanaResults:
    return EuropeanaResults(
        _main_config(registry).section("Content").get("europeanaAPI"),
        registry.get("http").create_client(),
    )


def get_expand_facets(registry: ServiceRegistry) -> ExpandFacets:
    return ExpandFacets(
        registry.get("config_manager"), registry.get("search.results_manager").get("Solr")
    )


def get_favorite_facets(registry: ServiceRegistry) -> FavoriteFacets:
    return FavoriteFacets(
        registry.get("config_manager"),
        None,
        registry.get("account_capabilities").get_tag_setting(),
    )


def get_map_selection(registry: ServiceRegistry) -> MapSelection:
    solr = registry.get("search.backend_manager").get("Solr")
    return MapSelection(registry.get("config_manager"), solr)


def get_random_recommend(registry: ServiceRegistry) -> RandomRecommend:
    return RandomRecommend(
        registry.get("search_service"), registry.get("search.params_manager")
    )


def get_side_facets(registry: ServiceRegistry) -> SideFacets:
    return SideFacets(registry.get("config_manager"), registry.get("search.facet_helper"))


def get_summon_best_bets(registry: ServiceRegistry) -> SummonBestBets:
    return SummonBestBets(registry.get("search.results_manager"))


def get_summon_databases(registry: ServiceRegistry) -> SummonDatabases:
    return SummonDatabases(registry.get("search.results_manager"))


def get_summon_results(registry: ServiceRegistry) -> SummonResults:
    return SummonResults(registry.get("search.runner"))


def get_summon_topics(registry: ServiceRegistry) -> SummonTopics:
    return SummonTopics(registry.get("search.results_manager"))


def get_switch_query(registry: ServiceRegistry) -> SwitchQuery:
    return SwitchQuery(registry.get("search.backend_manager"))


def get_top_facets(registry: ServiceRegistry) -> TopFacets:
    return TopFacets(registry.get("config_manager"))


def get_visual_facets(registry: ServiceRegistry) -> VisualFacets:
    return VisualFacets(registry.get("config_manager"))


def get_web_results(registry: ServiceRegistry) -> WebResults:
    return WebResults(registry.get("search.runner"))


def get_world_cat_identities(registry: ServiceRegistry) -> WorldCatIdentities:
    return WorldCatIdentities(registry.get("worldcat_utils"))
