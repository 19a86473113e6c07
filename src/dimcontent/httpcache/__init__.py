"""Http cache tagging."""

from dimcontent.httpcache.reference_store import ReferenceStore

__all__ = ["ReferenceStore"]
