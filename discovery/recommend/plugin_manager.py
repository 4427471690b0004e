"""Plugin manager for recommendation modules."""

from typing import Any

from ..services.plugin_manager import PluginManager
from ..services.service_registry import ServiceRegistry
from . import factory
from .base import RecommendInterface

FACTORIES = {
    "AuthorFacets": factory.get_author_facets,
    "AuthorInfo": factory.get_author_info,
    "AuthorityRecommend": factory.get_authority_recommend,
    "CatalogResults": factory.get_catalog_results,
    "CollectionSideFacets": factory.get_collection_side_facets,
    "DPLATerms": factory.get_dpla_terms,
    "EuropeanaResults": factory.get_europeana_results,
    "ExpandFacets": factory.get_expand_facets,
    "FavoriteFacets": factory.get_favorite_facets,
    "MapSelection": factory.get_map_selection,
    "RandomRecommend": factory.get_random_recommend,
    "SideFacets": factory.get_side_facets,
    "SummonBestBets": factory.get_summon_best_bets,
    "SummonDatabases": factory.get_summon_databases,
    "SummonResults": factory.get_summon_results,
    "SummonTopics": factory.get_summon_topics,
    "SwitchQuery": factory.get_switch_query,
    "TopFacets": factory.get_top_facets,
    "VisualFacets": factory.get_visual_facets,
    "WebResults": factory.get_web_results,
    "WorldCatIdentities": factory.get_world_cat_identities,
}


class RecommendPluginManager(PluginManager):
    """
    Recommendation modules by name.

    Modules hold per-search state, so every ``get`` builds a new instance.
    """

    instance_of = RecommendInterface
    shared_by_default = False

    def __init__(self, parent: ServiceRegistry) -> None:
        super().__init__(parent)
        for name, factory_func in FACTORIES.items():
            self.register_factory(name, factory_func)

    def load(self, definition: str, params: Any = None, request: Any = None) -> RecommendInterface:
        """
        Build and initialize a module from a ``Name:settings`` string.

        Args:
            definition (str): Module name, optionally followed by ``:`` and its settings
            params: Search parameters of the current search
            request: Request arguments
        """
        name, _, settings = definition.partition(":")
        module = self.get(name)
        module.set_config(settings)
        module.init(params, request)
        return module
