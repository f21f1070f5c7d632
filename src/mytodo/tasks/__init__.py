"""
Task subsystem.

Components:
- task_models.py: Task record, id generation, validation error
- task_repository.py: in-memory ordered list; every mutation is persisted
- task_filters.py: category filter + search evaluator
"""
