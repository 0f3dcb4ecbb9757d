# Services package init
"""
KB Notes Backend — Services Layer
==================================

Service Inventory:
    - NoteCatalog: Immutable folders + notes-by-key with linear-scan lookups
    - FolderService: id/name fallback dispatch, raises NotFoundError on misses
    - seed: Built-in catalog and JSON catalog file loading
"""
