"""
Task subsystem.

Components:
- task_models.py: data structures (Task, Summary, Snapshot)
- task_store.py: the persisted task list (add/toggle/remove/list)
- summary.py: pure counts + completion percentage
- task_api.py: caller-side helpers (ids, title validation)
"""
