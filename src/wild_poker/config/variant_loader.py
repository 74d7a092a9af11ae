"""Configuration loader for wild card poker variants."""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

from wild_poker.core.hand import HandLayout, LayoutType
from wild_poker.evaluation.types import RankingScheme
from wild_poker.evaluation.wild_rules import WildCardRule, wild_rule_from_config

logger = logging.getLogger(__name__)


@dataclass
class VariantConfig:
    """Configuration for a wild card poker variant."""

    id: str
    name: str
    description: str
    layout: HandLayout
    wild_cards: Dict[str, Any] = field(default_factory=dict)
    ranking: RankingScheme = RankingScheme.CLASSIC

    def build_rule(self, **overrides: Any) -> WildCardRule:
        """
        Build this variant's wild card rule.

        Args:
            overrides: Config keys to replace, e.g. rankRequired=True
        """
        return wild_rule_from_config({**self.wild_cards, **overrides})


def _parse_layout(data: Dict[str, Any]) -> HandLayout:
    layout_type = data.get("type", "stud")
    if layout_type == LayoutType.DRAW:
        return HandLayout.draw(draw_cards=data.get("cards", 5))
    if layout_type == LayoutType.STUD:
        return HandLayout.stud(
            hole_cards=data.get("holeCards", 2),
            max_board_cards=data.get("maxBoardCards"),
            down_cards=data.get("downCards", 1),
            max_down_cards=data.get("maxDownCards")
        )
    raise ValueError(f"Unknown layout type: {layout_type}")


class VariantConfigLoader:
    """Loads and manages variant configurations."""

    def __init__(self, config_dir: Optional[Path] = None):
        """
        Initialize the loader.

        Args:
            config_dir: Directory containing variant JSON files.
                       Defaults to the package's data/variants.
        """
        if config_dir is None:
            config_dir = Path(__file__).parents[1] / "data" / "variants"

        self.config_dir = config_dir
        self._configs: Dict[str, VariantConfig] = {}
        self._loaded = False

    def load_all_configs(self) -> None:
        """Load all variant configuration files from the directory."""
        if self._loaded:
            return

        logger.info(f"Loading variant configurations from {self.config_dir}")

        if not self.config_dir.exists():
            logger.error(f"Configuration directory not found: {self.config_dir}")
            raise FileNotFoundError(f"Configuration directory not found: {self.config_dir}")

        json_files = sorted(self.config_dir.glob("*.json"))
        if not json_files:
            logger.warning(f"No JSON configuration files found in {self.config_dir}")

        for json_file in json_files:
            try:
                config = self.load_config_file(json_file)
            except (ValueError, KeyError) as e:
                logger.error(f"Failed to load configuration from {json_file}: {e}")
                raise
            self._configs[json_file.stem] = config
            logger.debug(f"Loaded configuration for {json_file.stem}")

        logger.info(f"Loaded {len(self._configs)} variant configurations")
        self._loaded = True

    @staticmethod
    def load_config_file(filepath: Path) -> VariantConfig:
        """Load a single variant configuration file."""
        with open(filepath) as f:
            data = json.load(f)

        ranking = data.get("ranking", RankingScheme.CLASSIC.value)
        try:
            scheme = RankingScheme(ranking)
        except ValueError:
            raise ValueError(f"Unknown ranking scheme: {ranking}")

        config = VariantConfig(
            id=data.get("id", filepath.stem),
            name=data.get("name", ""),
            description=data.get("description", ""),
            layout=_parse_layout(data.get("layout", {})),
            wild_cards=data.get("wildCards", {}),
            ranking=scheme,
        )
        # Fail at load time rather than on first hand
        config.build_rule()
        return config

    def get_config(self, variant: str) -> Optional[VariantConfig]:
        """
        Get configuration for a specific variant.

        Args:
            variant: The variant id (e.g., 'baseball')

        Returns:
            VariantConfig if found, None otherwise
        """
        if not self._loaded:
            self.load_all_configs()

        return self._configs.get(variant)

    def get_all_configs(self) -> Dict[str, VariantConfig]:
        """Get all loaded configurations."""
        if not self._loaded:
            self.load_all_configs()

        return self._configs.copy()


# Global instance
variant_config_loader = VariantConfigLoader()


def get_variant_config(variant: str) -> VariantConfig:
    """
    Get a variant's configuration.

    Raises:
        ValueError: If no such variant is configured
    """
    config = variant_config_loader.get_config(variant)
    if config is None:
        raise ValueError(f"No configuration found for variant: {variant}")
    return config
