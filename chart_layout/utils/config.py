"""
Configuration utility for chart layout.
"""

import copy
import json
import logging
import os
from typing import Any, Dict, Optional, Tuple, Union

from ..errors import ConfigurationError
from ..style.normalizer import normalize_style

logger = logging.getLogger(__name__)

AXIS_FONT = 'normal 12px Montserrat,sans-serif'

DEFAULT_OPTIONS: Dict[str, Any] = {
    "max_columns": None,
    "variant": "bar",
    "orientation": "vertical",
    "category_axis_scale": "separate",
    "value_axis_scale": "separate",
    "category_axis_sort": "firstSeries",
    "category_axis_max_label_count": None,
    "value_axis_max": "dataMaxRoundedUp",
    "x_axis_pointer": "none",
    "y_axis_pointer": "none",
    "x_axis_pointer_label": "bottom",
    "y_axis_pointer_label": "left",
    "drill_up_button_text": "<",
    "no_data_text": None,
}

DEFAULT_STYLES: Dict[str, Dict[str, Any]] = {
    "chart": {
        "font": "normal 12px Montserrat,sans-serif",
        "padding": 8,
    },
    "chart_title": {
        "font": "bold 16px Montserrat,sans-serif",
        "textAlign": "left",
        "margin": 8,
    },
    "cell": {
        "padding": 4,
    },
    "cell_title": {
        "font": "normal 14px Montserrat,sans-serif",
        "textAlign": "center",
        "marginBottom": 4,
    },
    "x_axis": {
        "font": AXIS_FONT,
        "textAlign": "center",
        "marginTop": 8,
    },
    "y_axis": {
        "font": AXIS_FONT,
        "textAlign": "right",
        # Extra margin on the left too, label widths can be off a few pixels
        "margin": 8,
    },
    "x_axis_pointer": {
        "border": "dashed 1px #555",
        "backgroundColor": "#ccc",
        "opacity": "0.5",
    },
    "y_axis_pointer": {
        "border": "dashed 1px #555",
        "backgroundColor": "#ccc",
        "opacity": "0.5",
    },
    "x_axis_pointer_label": {
        "color": "#000",
        "font": AXIS_FONT,
        "backgroundColor": "#eee",
        "border": "solid 1px #999",
        "borderRadius": 0,
        "padding": 4,
        "margin": 4,
    },
    "y_axis_pointer_label": {
        "color": "#000",
        "font": AXIS_FONT,
        "backgroundColor": "#eee",
        "border": "solid 1px #999",
        "borderRadius": 0,
        "padding": 4,
        "marginRight": 4,
    },
    "drill_up_button": {
        "margin": 4,
        "color": "#000",
        "font": "normal 22px Montserrat,sans-serif",
        "marginRight": 10,
    },
}


class ChartConfig:
    """Configuration for laying out a chart."""

    def __init__(self, options: Optional[Dict[str, Any]] = None,
                 styles: Optional[Dict[str, Union[Dict[str, Any], str]]] = None,
                 config_path: Optional[str] = None):
        """
        Initialize the configuration.

        Args:
            options: Option values overriding the defaults
            styles: Style declarations per element, as mappings or CSS text,
                applied after the defaults
            config_path: Optional JSON file to load options and styles from
        """
        self.config_path = config_path
        self.config: Dict[str, Any] = {}
        self._set_defaults()

        if config_path:
            self.load()

        for key, value in (options or {}).items():
            self.set(f"options.{key}", value)
        for name, style in (styles or {}).items():
            self.set(f"styles.{name}", style if isinstance(style, str) else dict(style))

        logger.debug(f"Chart configuration initialized (config_path: {config_path})")

    def load(self) -> None:
        """Read options and styles from the JSON file over the current values."""
        if not self.config_path or not os.path.exists(self.config_path):
            logger.debug(f"No chart configuration at {self.config_path}, keeping defaults")
            return

        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                loaded = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid configuration file {self.config_path}: {e}") from e

        if not isinstance(loaded, dict):
            raise ConfigurationError(f"Configuration file {self.config_path} must hold a JSON object")

        for section in ("options", "styles"):
            values = loaded.get(section, {})
            if not isinstance(values, dict):
                raise ConfigurationError(f"'{section}' in {self.config_path} must be a JSON object")
            for key, value in values.items():
                self.set(f"{section}.{key}", value)

        logger.debug(f"Chart configuration read from {self.config_path}")

    def save(self) -> None:
        """
        Write the options and style overrides to the JSON file.

        Raises:
            ConfigurationError: If no file path was given
        """
        if not self.config_path:
            raise ConfigurationError("No configuration path set")

        directory = os.path.dirname(self.config_path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        with open(self.config_path, 'w', encoding='utf-8') as f:
            json.dump(self.config, f, indent=4)

        logger.debug(f"Chart configuration written to {self.config_path}")

    def _parent(self, key: str, create: bool = False) -> Tuple[Optional[Dict[str, Any]], str]:
        # Walk a dotted key down to the dictionary holding its last part
        *path, leaf = key.split('.')
        node = self.config
        for part in path:
            child = node.get(part)
            if not isinstance(child, dict):
                if not create:
                    return None, leaf
                child = node[part] = {}
            node = child
        return node, leaf

    def get(self, key: str, default: Any = None) -> Any:
        """
        Look up a value by dotted key, e.g. ``'options.max_columns'``.

        Args:
            key: Dotted configuration key
            default: Returned when the key is not set

        Returns:
            The stored value or ``default``
        """
        parent, leaf = self._parent(key)
        return default if parent is None else parent.get(leaf, default)

    def set(self, key: str, value: Any) -> None:
        """Store ``value`` under a dotted key, creating sections as needed."""
        parent, leaf = self._parent(key, create=True)
        parent[leaf] = value

    def remove(self, key: str) -> bool:
        """
        Delete a dotted key.

        Returns:
            True if the key was set and is now removed
        """
        parent, leaf = self._parent(key)
        if parent is None or leaf not in parent:
            return False
        del parent[leaf]
        return True

    def get_all(self) -> Dict[str, Any]:
        """A deep copy of every stored option and style override."""
        return copy.deepcopy(self.config)

    def option(self, name: str) -> Any:
        """Get an option, falling back to its default."""
        return self.get(f"options.{name}", DEFAULT_OPTIONS.get(name))

    def style(self, name: str) -> Dict[str, str]:
        """
        Get the style declaration for a chart element.

        Defaults and overrides are both expanded to per-side properties
        before merging, so an override shorthand such as ``margin`` replaces
        every default side and overrides may be CSS text or mappings.

        Args:
            name: Element name, e.g. 'x_axis'

        Returns:
            The merged declaration as CSS property names and values
        """
        merged = normalize_style(DEFAULT_STYLES.get(name))
        merged.update(normalize_style(self.get(f"styles.{name}")))
        return merged

    @property
    def max_columns(self) -> Optional[int]:
        return self._positive_int("max_columns")

    @property
    def category_axis_max_label_count(self) -> Optional[int]:
        return self._positive_int("category_axis_max_label_count")

    def _positive_int(self, name: str) -> Optional[int]:
        value = self.option(name)
        if value is None:
            return None
        if isinstance(value, bool) or not isinstance(value, (int, float)) or value != int(value) or value < 1:
            raise ConfigurationError(f"'{name}' must be a whole number of at least 1, got {value!r}")
        return int(value)

    def _set_defaults(self) -> None:
        """Set default configuration values."""
        self.config = {
            "options": {},
            "styles": {},
        }
        logger.debug("Default configuration set")
