"""Listing feature: gather and order the records to display."""

from dirlist.features.listing.usecases import ListPathsService, ListingPlan, ListingSection, TreeNode

__all__ = ["ListPathsService", "ListingPlan", "ListingSection", "TreeNode"]
