# Routes package init
"""
KB Notes Backend — API Routes Package
======================================

Route Inventory:
    - folders.py: GET /folders                          (list folders)
                  GET /folders/{id-or-name}             (single folder)
                  GET /folders/{id-or-name}/notes       (notes of a folder)
                  GET /folders/{id-or-name}/notes/{id}  (single note)
    - health.py:  GET /health                           (service health check)

Routes stay thin: extract path segments, call FolderService, wrap the result.
"""
