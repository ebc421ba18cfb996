"""
Configuration management for the hybrid automata library.

This module provides centralized configuration for default parameters,
paths, and settings used throughout the hybrid automata library.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union


@dataclass
class AutomatonConfig:
    """Configuration for automaton construction and mutation."""

    # Log (at DEBUG) when add_transition replaces the label of an existing edge
    log_label_overwrite: bool = True


@dataclass
class VisualizationConfig:
    """Configuration for plotting and visualization."""

    # Figure settings
    default_figsize: Tuple[float, float] = (8, 6)
    default_dpi: int = 150
    default_bbox_inches: str = "tight"

    # Mode graph settings
    node_color: str = "lightblue"
    node_size: float = 900
    font_size: int = 14
    font_weight: str = "bold"
    edge_label_font_size: int = 10
    connection_style: str = "arc3,rad=0.15"


@dataclass
class LoggingConfig:
    """Configuration for logging throughout the library."""

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"
    enable_file_logging: bool = False
    log_file: Optional[str] = None
    verbose: bool = False  # For print statement compatibility


class HybridAutomataConfig:
    """
    Centralized configuration manager for the hybrid automata library.

    This class provides default values and configuration management for
    automaton behaviour, visualization and logging.
    """

    def __init__(self):
        self.automaton = AutomatonConfig()
        self.visualization = VisualizationConfig()
        self.logging = LoggingConfig()
        self._output_base_dir = None

    @property
    def output_dir(self) -> Path:
        """Get the base output directory for figures."""
        if self._output_base_dir is None:
            env_dir = os.getenv("HYBRID_AUTOMATA_OUTPUT_DIR")
            if env_dir:
                self._output_base_dir = Path(env_dir)
            else:
                self._output_base_dir = Path.cwd() / "output"
        return self._output_base_dir

    def set_output_dir(self, path: Union[str, Path]) -> None:
        """Set the base output directory."""
        self._output_base_dir = Path(path)

    def get_output_subdir(self, subdir: str) -> Path:
        """Get a subdirectory within the output directory."""
        full_path = self.output_dir / subdir
        full_path.mkdir(parents=True, exist_ok=True)
        return full_path

    def get_figure_config(self) -> Dict[str, Any]:
        """Get standard figure configuration for matplotlib."""
        return {
            "figsize": self.visualization.default_figsize,
            "dpi": self.visualization.default_dpi,
        }

    def get_node_style(self) -> Dict[str, Any]:
        """Get standard mode node drawing style."""
        return {
            "node_color": self.visualization.node_color,
            "node_size": self.visualization.node_size,
            "font_size": self.visualization.font_size,
            "font_weight": self.visualization.font_weight,
        }

    def update_from_dict(self, config_dict: Dict[str, Any]) -> None:
        """Update configuration from a dictionary."""
        for section, values in config_dict.items():
            if section not in ("automaton", "visualization", "logging"):
                raise ValueError(f"Unknown config section: {section}")
            section_obj = getattr(self, section)
            for key, value in values.items():
                if hasattr(section_obj, key):
                    setattr(section_obj, key, value)
                else:
                    raise ValueError(f"Unknown config option: {section}.{key}")

    def to_dict(self) -> Dict[str, Any]:
        """Export configuration to a dictionary."""
        return {
            "automaton": {
                "log_label_overwrite": self.automaton.log_label_overwrite,
            },
            "visualization": {
                "default_figsize": self.visualization.default_figsize,
                "default_dpi": self.visualization.default_dpi,
                "node_color": self.visualization.node_color,
                "node_size": self.visualization.node_size,
                "font_size": self.visualization.font_size,
                "edge_label_font_size": self.visualization.edge_label_font_size,
            },
            "logging": {
                "level": self.logging.level,
                "format": self.logging.format,
                "date_format": self.logging.date_format,
                "enable_file_logging": self.logging.enable_file_logging,
                "log_file": self.logging.log_file,
                "verbose": self.logging.verbose,
            },
        }

    def get_logger(self, name: str) -> logging.Logger:
        """Get a logger instance with configured settings.

        The level is read from ``self.logging.level`` the first time a logger
        is configured, usually when its module is imported. Changing the level
        afterwards means calling ``setLevel`` on the logger and its handlers.
        """
        logger = logging.getLogger(name)

        # Only configure if not already configured
        if not logger.handlers:
            logger.setLevel(getattr(logging, self.logging.level))

            console_handler = logging.StreamHandler()
            console_handler.setLevel(getattr(logging, self.logging.level))
            formatter = logging.Formatter(self.logging.format, self.logging.date_format)
            console_handler.setFormatter(formatter)
            logger.addHandler(console_handler)

            if self.logging.enable_file_logging and self.logging.log_file:
                file_handler = logging.FileHandler(self.logging.log_file)
                file_handler.setLevel(getattr(logging, self.logging.level))
                file_handler.setFormatter(formatter)
                logger.addHandler(file_handler)

        return logger


# Global configuration instance
# Users can import and modify this directly:
# from hybrid_automata import config
# config.automaton.log_label_overwrite = False
config = HybridAutomataConfig()
