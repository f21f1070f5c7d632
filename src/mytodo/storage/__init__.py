"""
Persistence.

Components:
- kv_store.py: SQLite-backed string key-value store
- task_storage.py: task list + quote dismissal marker on top of a key-value store
"""
