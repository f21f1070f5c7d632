"""
mytodo: a local task list with a daily motivational banner.

Subpackages:
- tasks: Task model, repository (sole mutator) and filter/search
- storage: key-value store and the task/quote-marker adapter
- render: pure projection of tasks into display records
- core: ports, interaction controller, daily quote banner, app state
- cli / connectors: composition root, slash commands, console host
"""

__version__ = "0.1.0"
