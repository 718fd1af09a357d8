"""Renderer configuration management."""

import os
from pathlib import Path
import tomli
from dataclasses import dataclass
from typing import Optional, Union

import constants
from common.base.logging_config import get_logger

logger = get_logger(__name__)

CLOSING_TAG_STYLES = ("standard", "self_closing")

@dataclass(frozen=True)
class RenderConfig:
    """Settings controlling how an element forest is rendered to HTML text."""
    indent: str = "\t"
    closing_tag: str = "standard"
    attribute_separator: str = ""

    def __post_init__(self):
        if self.closing_tag not in CLOSING_TAG_STYLES:
            raise ValueError(
                f"Invalid closing_tag '{self.closing_tag}', "
                f"expected one of: {', '.join(CLOSING_TAG_STYLES)}"
            )
        for field_name in ('indent', 'attribute_separator'):
            if not isinstance(getattr(self, field_name), str):
                raise ValueError(f"Setting '{field_name}' must be a string")

    def closing_line(self, tag: str) -> str:
        """
        Build the closing tag text for an element.

        :param tag: Element tag name
        :return: ``</tag>`` or ``<tag/>`` depending on the configured style
        """
        if self.closing_tag == "self_closing":
            return f"<{tag}/>"
        return f"</{tag}>"


def load_render_config(config_path: Union[str, Path]) -> RenderConfig:
    """
    Load and validate renderer configuration from a TOML file.

    :param config_path: Path to TOML configuration file
    :return: Parsed configuration
    :raises FileNotFoundError: if the file does not exist
    :raises ValueError: if a setting has an invalid value
    """
    try:
        logger.info(f"Loading render configuration from {config_path}")
        with open(config_path, 'rb') as f:
            config = tomli.load(f)

        settings = config.get('render', {})
        defaults = RenderConfig()
        render_config = RenderConfig(
            indent=settings.get('indent', defaults.indent),
            closing_tag=settings.get('closing_tag', defaults.closing_tag),
            attribute_separator=settings.get('attribute_separator', defaults.attribute_separator),
        )

        logger.info(f"Render configuration loaded: indent={render_config.indent!r}, "
                    f"closing_tag={render_config.closing_tag}")
        return render_config

    except Exception as e:
        logger.error(f"Error loading render configuration: {str(e)}")
        raise


# Default configuration file path
DEFAULT_CONFIG_PATH = Path(constants.CONFIG_DIR) / "markup.toml"

# Global render configuration instance
_render_config = None

def init_render_config(config_path: Optional[Union[str, Path]] = None) -> RenderConfig:
    """
    Initialize the global render configuration.

    :param config_path: Path to configuration file; defaults to MARKUP_CONFIG_PATH
        or config/markup.toml
    :return: Render configuration instance
    """
    global _render_config
    config_path = config_path or constants.MARKUP_CONFIG_PATH or DEFAULT_CONFIG_PATH
    logger.info(f"Initializing render configuration with config path: {config_path}")
    _render_config = load_render_config(config_path)
    return _render_config

def get_render_config() -> RenderConfig:
    """
    Get the global render configuration, loading it on first use.

    Falls back to built-in defaults when no explicit path is configured and
    the default file is absent.

    :return: Render configuration instance
    """
    global _render_config
    if _render_config is None:
        if constants.MARKUP_CONFIG_PATH or os.path.exists(DEFAULT_CONFIG_PATH):
            _render_config = init_render_config()
        else:
            logger.info("No render configuration file found, using defaults")
            _render_config = RenderConfig()
    return _render_config

def reset_render_config() -> None:
    """Drop the global render configuration so the next lookup reloads it."""
    global _render_config
    _render_config = None
