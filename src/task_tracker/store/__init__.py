"""
Storage subsystem.

Components:
- errors.py: StoreError (operation tag + message + chained cause)
- json_store.py: JSONFileStore, a single-file JSON document store
"""
