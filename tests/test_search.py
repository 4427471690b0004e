"""
Unit tests for the search layer
"""

import pytest
from werkzeug.datastructures import MultiDict
from discovery.exceptions import BackendError, ResolutionError
from discovery.search.backend import MemoryBackend
from discovery.search.events import ERROR, POST, PRE
from discovery.search.facet_helper import HierarchicalFacetHelper
from discovery.search.params import SearchParams
from discovery.search.results import SearchResults
from discovery.search.search_tabs import SearchTabsHelper


@pytest.fixture
def search_registry(registry, sample_records):
    registry.get("search.backend_manager").register("Solr", MemoryBackend("Solr", sample_records))
    return registry


@pytest.mark.unit
class TestMemoryBackend:
    """Test the in-memory backend"""

    def test_substring_search(self, sample_records):
        backend = MemoryBackend("Solr", sample_records)
        collection = backend.search({"lookfor": "python"}, 0, 10)
        assert collection.total == 3

    def test_field_search_filters_and_facets(self, sample_records):
        backend = MemoryBackend("Solr", sample_records)
        collection = backend.search(
            {"lookfor": "smith", "type": "author"},
            0,
            10,
            {"filters": ['format:"Book"'], "facets": ["format"]},
        )
        assert [r["id"] for r in collection.records] == ["1"]
        assert collection.facets == {"format": {"Book": 1}}

    def test_paging(self, sample_records):
        collection = MemoryBackend("Solr", sample_records).search({}, 2, 1)
        assert collection.total == 4
        assert [r["id"] for r in collection.records] == ["3"]

    def test_retrieve_and_random(self, sample_records):
        backend = MemoryBackend("Solr", sample_records)
        assert backend.retrieve("2").records[0]["title"] == "Advanced Python"
        assert len(backend.random({"lookfor": "python"}, 2).records) == 2


@pytest.mark.unit
class TestSearchService:
    """Test backend resolution and events"""

    def test_search_raises_pre_and_post(self, search_registry):
        seen = []
        events = search_registry.get("search.shared_events")
        events.attach("search", PRE, lambda sender, **kw: seen.append((PRE, kw["context"])))
        events.attach("search", POST, lambda sender, **kw: seen.append((POST, sender.total)))

        service = search_registry.get("search_service")
        collection = service.search("Solr", {"lookfor": "python"})
        assert collection.total == 3
        assert seen == [(PRE, "search"), (POST, 3)]

    def test_error_event_and_reraise(self, search_registry):
        class Broken(MemoryBackend):
            def search(self, query, offset, limit, params=None):
                raise RuntimeError("index offline")

        search_registry.get("search.backend_manager").register("Broken", Broken("Broken"))
        errors = []
        search_registry.get("search.shared_events").attach(
            "search", ERROR, lambda sender, **kw: errors.append(kw["error"])
        )
        with pytest.raises(RuntimeError, match="index offline"):
            search_registry.get("search_service").search("Broken", {})
        assert len(errors) == 1

    def test_unknown_backend(self, search_registry):
        with pytest.raises(BackendError, match="Unable to resolve backend"):
            search_registry.get("search_service").retrieve("Nowhere", "1")


@pytest.mark.unit
class TestParamsAndResults:
    """Test search parameters, results and their plugin managers"""

    def test_params_from_request(self, search_registry):
        params = search_registry.get("search.params_manager").get("Solr")
        params.init_from_request(
            MultiDict([("lookfor", " python "), ("filter", 'format:"Book"'), ("page", "2"), ("limit", "1")])
        )
        assert params.get_display_query() == "python"
        assert params.get_filters() == ['format:"Book"']
        assert params.get_offset() == 1

    def test_managers_build_fresh_objects(self, search_registry):
        params_manager = search_registry.get("search.params_manager")
        results_manager = search_registry.get("search.results_manager")
        assert isinstance(params_manager.get("Solr"), SearchParams)
        assert params_manager.get("Solr") is not params_manager.get("Solr")
        assert isinstance(results_manager.get("Solr"), SearchResults)
        assert results_manager.get("Solr") is not results_manager.get("Solr")

    def test_unknown_backend_has_no_params(self, search_registry):
        with pytest.raises(ResolutionError):
            search_registry.get("search.params_manager").get("Nowhere")

    def test_facet_list(self, search_registry):
        results = search_registry.get("search.results_manager").get("Solr")
        params = results.get_params()
        params.set_basic_search("python")
        params.add_facet("format", "Format")
        params.add_filter('format:"Book"')

        facets = results.get_facet_list()
        assert facets["format"]["label"] == "Format"
        assert facets["format"]["list"] == [
            {"value": "Book", "display_text": "Book", "count": 2, "is_applied": True}
        ]
        assert results.get_result_total() == 2

    def test_runner_applies_setup_callback(self, search_registry):
        def setup(runner, params, search_class_id):
            params.set_limit(1)

        results = search_registry.get("search.runner").run({"lookfor": "python"}, "Solr", setup)
        assert results.get_result_total() == 3
        assert len(results.get_results()) == 1


@pytest.mark.unit
class TestSearchTabsHelper:
    """Test tab configuration and hidden filters"""

    def make_helper(self, registry, request=None, permissions=None):
        return SearchTabsHelper(
            registry.get("search.results_manager"),
            {"Solr": "Catalog", "Solr:books": "Books", "Summon": "Articles"},
            {"Solr:books": 'format:"Book"'},
            request,
            permissions or {},
        )

    def test_default_tab_selected(self, search_registry):
        tabs = self.make_helper(search_registry).get_tab_config("Solr", [])
        assert [tab["id"] for tab in tabs if tab["selected"]] == ["Solr"]

    def test_filtered_tab_selected(self, search_registry):
        tabs = self.make_helper(search_registry).get_tab_config("Solr", ['format:"Book"'])
        assert [tab["id"] for tab in tabs if tab["selected"]] == ["Solr:books"]

    def test_hidden_filters_from_request(self, search_registry):
        request = type("Request", (), {"args": MultiDict([("hiddenFilters", 'format:"Journal"')])})()
        helper = self.make_helper(search_registry, request)
        assert helper.get_hidden_filters("Solr") == ['format:"Journal"']
        assert helper.get_hidden_filters("Solr", ignore_current_request=True) == []

    def test_hidden_filters_outside_request(self, search_registry):
        helper = self.make_helper(search_registry, search_registry.get("request"))
        assert helper.get_hidden_filters("Solr") == []

    def test_permissions(self, search_registry):
        helper = self.make_helper(search_registry, permissions={"Summon": "access.Summon"})
        assert "Summon" not in [tab["id"] for tab in helper.get_tab_config("Solr", [])]
        ids = [tab["id"] for tab in helper.get_tab_config("Solr", [], ["access.Summon"])]
        assert "Summon" in ids

    def test_results_for_tab_carry_filters(self, search_registry):
        results = self.make_helper(search_registry).get_results("Solr:books")
        assert results.get_params().get_filters() == ['format:"Book"']
        assert results.get_result_total() == 3


@pytest.mark.unit
class TestHierarchicalFacetHelper:
    """Test hierarchical facet sorting and nesting"""

    def test_build_facet_array(self):
        helper = HierarchicalFacetHelper()
        values = [
            {"value": "1/Main/Floor 2/", "count": 3},
            {"value": "0/Main/", "count": 5},
            {"value": "0/Annex/", "count": 1},
        ]
        tree = helper.build_facet_array(helper.sort_facet_list(values))
        assert [node["display_text"] for node in tree] == ["Annex", "Main"]
        assert tree[1]["children"][0]["display_text"] == "Floor 2"

    def test_format_display_text(self):
        assert HierarchicalFacetHelper().format_display_text("1/Main/Floor 2/", " > ") == "Main > Floor 2"
