"""
Unit tests for AJAX handlers
"""

from unittest.mock import MagicMock

import pytest
from discovery.ajax.keep_alive import KeepAlive, KeepAliveFactory
from discovery.ajax.plugin_manager import AjaxHandlerPluginManager


@pytest.mark.unit
class TestKeepAlive:
    """Test the keep-alive handler"""

    def test_handle_request_touches_session(self):
        session_manager = MagicMock()
        handler = KeepAlive(session_manager)
        assert handler.handle_request({}) == (True, "OK")
        session_manager.get_id.assert_called_once_with()

    def test_factory(self):
        session_manager = MagicMock()
        container = MagicMock()
        container.get.return_value = session_manager

        handler = KeepAliveFactory()(container, KeepAlive)
        container.get.assert_called_once_with("session_manager")
        handler.handle_request({})
        session_manager.get_id.assert_called_once_with()

    def test_factory_rejects_options(self):
        with pytest.raises(ValueError):
            KeepAliveFactory()(MagicMock(), "keepAlive", {"unexpected": True})

    def test_plugin_manager(self, registry):
        handlers = registry.get("ajax.plugin_manager")
        assert isinstance(handlers, AjaxHandlerPluginManager)
        handler = handlers.get("keepalive")
        assert isinstance(handler, KeepAlive)
        assert handler.session_manager is registry.get("session_manager")
