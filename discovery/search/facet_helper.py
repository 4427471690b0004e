"""
Hierarchical Facet Helper Module

Hierarchical facet values are encoded as ``<level>/<part>/<part>/``, for
example ``0/Books/`` and ``1/Books/Fiction/``.
"""

from typing import Any, Dict, List


def parse_hierarchical_value(value: str) -> Dict[str, Any]:
    level, _, path = value.partition("/")
    parts = [part for part in path.split("/") if part]
    return {
        "level": int(level) if level.isdigit() else 0,
        "parts": parts,
        "parent": "/".join([str(int(level) - 1)] + parts[:-1]) + "/"
        if level.isdigit() and int(level) > 0 else None,
    }


class HierarchicalFacetHelper:
    """Sorts and nests hierarchical facet values."""

    def sort_facet_list(self, facet_list: List[Dict[str, Any]], top_level: bool = True) -> List[Dict[str, Any]]:
        """
        Sort facet values.

        With ``top_level`` only level-0 values are sorted alphabetically by
        display text, keeping count order elsewhere; otherwise every value is
        sorted alphabetically.
        """
        if top_level:
            top = [item for item in facet_list if parse_hierarchical_value(item["value"])["level"] == 0]
            rest = [item for item in facet_list if item not in top]
            return sorted(top, key=lambda item: self.format_display_text(item["value"]).lower()) + rest
        return sorted(facet_list, key=lambda item: self.format_display_text(item["value"]).lower())

    def format_display_text(self, value: str, separator: str = "/") -> str:
        parts = parse_hierarchical_value(value)["parts"]
        return separator.join(parts) if parts else value

    def build_facet_array(self, facet_list: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """Nest flat facet values into a tree via ``children`` lists."""
        nodes: Dict[str, Dict[str, Any]] = {}
        roots: List[Dict[str, Any]] = []
        ordered = sorted(facet_list, key=lambda item: parse_hierarchical_value(item["value"])["level"])
        for item in ordered:
            info = parse_hierarchical_value(item["value"])
            node = dict(item)
            node["level"] = info["level"]
            node["display_text"] = info["parts"][-1] if info["parts"] else item["value"]
            node["children"] = []
            nodes[item["value"]] = node
            parent = nodes.get(info["parent"]) if info["parent"] else None
            if parent is not None:
                parent["children"].append(node)
            else:
                roots.append(node)
        return roots
