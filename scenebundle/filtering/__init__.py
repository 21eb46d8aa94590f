"""Mini README: Filtering of dependency closures.

Exports the exclusion rules, the individual predicates and ``AssetFilter``.
"""

from .asset_filter import AssetFilter, ExclusionRules, is_allowed_by_mode, is_valid_asset_path

__all__ = ["AssetFilter", "ExclusionRules", "is_allowed_by_mode", "is_valid_asset_path"]
