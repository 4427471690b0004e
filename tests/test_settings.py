"""
Unit tests for INI configuration loading and account capabilities
"""

import pytest
from discovery.settings.account_capabilities import AccountCapabilities
from discovery.settings.reader import ConfigManager, ConfigSection, read_ini_file


@pytest.mark.unit
class TestConfigSection:
    """Test the read-only configuration mapping"""

    def test_missing_section_is_empty(self):
        config = ConfigSection({"Site": {"language": "en"}})
        assert config.has_section("Site")
        assert config.has_section("Proxy") is False
        assert dict(config.section("Proxy")) == {}
        assert config.section("Site")["language"] == "en"

    def test_typed_getters(self):
        section = ConfigSection(
            {"max": "10", "on": "true", "off": "0", "items": "a, b,,c"}
        )
        assert section.get_int("max") == 10
        assert section.get_int("missing", 64) == 64
        assert section.get_bool("on") is True
        assert section.get_bool("off") is False
        assert section.get_bool("missing", True) is True
        assert section.get_list("items") == ["a", "b", "c"]
        assert section.get_list("missing") == []

    def test_is_read_only(self):
        config = ConfigSection({"Site": {"language": "en"}})
        with pytest.raises(TypeError):
            config["Site"] = {}

    def test_to_dict(self):
        data = {"Site": {"language": "de"}}
        assert ConfigSection(data).to_dict() == data


@pytest.mark.unit
class TestConfigManager:
    """Test loading INI files with local overrides"""

    def test_read_ini_strips_quotes_and_keeps_case(self, tmp_path):
        path = tmp_path / "config.ini"
        path.write_text('[Site]\nlanguage = "de"\n[SearchTabs]\nSolr:books = Books\n')
        config = read_ini_file(str(path))
        assert config.section("Site")["language"] == "de"
        assert config.section("SearchTabs")["Solr:books"] == "Books"

    def test_missing_file_gives_empty_config(self, tmp_path):
        manager = ConfigManager(str(tmp_path))
        assert dict(manager.get("config")) == {}

    def test_local_override_wins(self, tmp_path):
        base = tmp_path / "base"
        local = tmp_path / "local"
        (local / "config").mkdir(parents=True)
        base.mkdir()
        (base / "config.ini").write_text("[Site]\nlanguage = en\n")
        (local / "config" / "config.ini").write_text("[Site]\nlanguage = fr\n")

        manager = ConfigManager(str(base), str(local))
        assert manager.get("config").section("Site")["language"] == "fr"

    def test_configs_are_loaded_once(self, tmp_path):
        (tmp_path / "facets.ini").write_text("[Results]\nformat = Format\n")
        manager = ConfigManager(str(tmp_path))
        assert manager.get("facets") is manager.get("facets")

    def test_set_config(self, tmp_path):
        manager = ConfigManager(str(tmp_path))
        manager.set_config("config", {"Social": {"tags": "false"}})
        assert manager.get("config").section("Social")["tags"] == "false"


@pytest.mark.unit
class TestAccountCapabilities:
    """Test account feature switches"""

    def test_tags_enabled_by_default(self):
        assert AccountCapabilities(ConfigSection()).get_tag_setting() == "enabled"

    def test_tags_disabled(self):
        config = ConfigSection({"Social": {"tags": "false"}})
        assert AccountCapabilities(config).get_tag_setting() == "disabled"
