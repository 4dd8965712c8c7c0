"""Use cases for building listing plans."""

from dirlist.features.listing.usecases.list_paths import (
    ListPathsService,
    ListingPlan,
    ListingSection,
    TreeNode,
)

__all__ = ["ListPathsService", "ListingPlan", "ListingSection", "TreeNode"]
