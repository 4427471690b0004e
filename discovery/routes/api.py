"""
API Routes Module

This module contains all API routes for the application.
"""

from flask import Blueprint, request, jsonify, current_app, Response
from ..utils import handle_api_errors, validate_required_fields
from ..models.config import AppConfig
from ..exceptions import ResourceNotFoundError

# Create blueprint for API routes
api_bp = Blueprint("api", __name__)


def _registry():
    return current_app.service_registry  # type: ignore


@api_bp.route("/ajax/<method>", methods=["GET", "POST"])
@handle_api_errors
def ajax(method: str) -> Response:
    """Dispatch to the AJAX handler registered under ``method``"""
    handlers = _registry().get("ajax.plugin_manager")
    if not handlers.has(method):
        raise ResourceNotFoundError(f"Unknown AJAX method: {method}")

    params = request.values.to_dict()
    if request.is_json:
        params.update(request.get_json(silent=True) or {})

    data, status = handlers.get(method).handle_request(params)
    return jsonify({"success": True, "data": data, "status": status})


@api_bp.route("/search", methods=["GET"])
@handle_api_errors
def search() -> Response:
    """Run a search; ``recommend`` arguments name modules as ``Name:settings``"""
    registry = _registry()
    backend = request.args.get("backend", "Solr")
    if not registry.get("search.backend_manager").has(backend):
        raise ResourceNotFoundError(f"Unknown search backend: {backend}")

    recommend_manager = registry.get("recommend.plugin_manager")
    definitions = request.args.getlist("recommend")
    for definition in definitions:
        name = definition.partition(":")[0]
        if not recommend_manager.has(name):
            raise ResourceNotFoundError(f"Unknown recommendation module: {name}")

    modules = []

    def load_modules(runner, params, search_class_id):
        # Modules may add facets or filters before the search runs
        for definition in definitions:
            module = recommend_manager.load(definition, params, request.args)
            modules.append((definition.partition(":")[0], module))

    results = registry.get("search.runner").run(request.args, backend, load_modules)
    recommendations = []
    for name, module in modules:
        module.process(results)
        recommendations.append({"name": name, "data": module.get_data()})

    tabs = registry.get("search_tabs_helper")
    return jsonify(
        {
            "success": True,
            "data": {
                "total": results.get_result_total(),
                "records": results.get_results(),
                "facets": results.get_facet_list(),
                "tabs": tabs.get_tab_config(backend),
                "recommendations": recommendations,
            },
        }
    )


@api_bp.route("/tags", methods=["POST"])
@handle_api_errors
@validate_required_fields(["tags"])
def parse_tags() -> Response:
    """Split a user-entered tag string into tags"""
    data = request.get_json()
    tags = _registry().get("tags").parse(str(data.get("tags") or ""))
    return jsonify({"success": True, "tags": tags})


@api_bp.route("/translate/<key>", methods=["GET"])
@handle_api_errors
def translate(key: str) -> Response:
    """Translate a message key"""
    translator = _registry().get("translator")
    text = translator.translate(
        key, request.args.get("domain", "default"), request.args.get("locale")
    )
    return jsonify({"success": True, "key": key, "text": text})


@api_bp.route("/config", methods=["GET"])
@handle_api_errors
def get_config() -> Response:
    """Get application configuration for frontend"""
    registry = _registry()
    config = registry.get("config_manager").get("config")
    tags = registry.get("tags")

    app_config = AppConfig(
        site_language=config.section("Site").get("language") or "en",
        max_tag_length=tags.max_length,
        tags_enabled=registry.get("account_capabilities").get_tag_setting() == "enabled",
        debug_mode=current_app.config["DEBUG"],
    )

    return jsonify({"success": True, "data": app_config.to_dict()})


@api_bp.route("/services", methods=["GET"])
@handle_api_errors
def list_services() -> Response:
    """List registered service identifiers and whether each has been built"""
    registry = _registry()
    services = [
        {"name": name, "instantiated": registry.is_instantiated(name)}
        for name in registry.get_registered_services()
    ]
    return jsonify({"success": True, "data": services})



@api_bp.route("/login", methods=["POST"])
@handle_api_errors
def login() -> Response:
    """Log in with the configured authentication method"""
    user = _registry().get("auth.manager").login(request)
    return jsonify(
        {
            "success": True,
            "data": {"username": user.username, "auth_method": user.auth_method},
        }
    )


@api_bp.route("/logout", methods=["POST"])
@handle_api_errors
def logout() -> Response:
    """Log out; returns where the browser should go next"""
    url = _registry().get("auth.manager").logout(request.values.get("url", "/"))
    return jsonify({"success": True, "redirect": url})
