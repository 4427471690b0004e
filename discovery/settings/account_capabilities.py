"""Account feature switches derived from config.ini."""

from .reader import ConfigSection


class AccountCapabilities:
    """Answers which optional account features are turned on."""

    def __init__(self, config: ConfigSection) -> None:
        self.config = config

    def get_tag_setting(self) -> str:
        """'enabled' unless [Social] tags is switched off."""
        social = self.config.section("Social")
        if "tags" in social and not social.get_bool("tags"):
            return "disabled"
        return "enabled"

