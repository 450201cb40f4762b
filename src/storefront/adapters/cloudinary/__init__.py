"""Cloudinary adapter – AssetHost over the Cloudinary SDK."""
from storefront.adapters.cloudinary.asset_host import CloudinaryAssetHost

__all__ = ["CloudinaryAssetHost"]
