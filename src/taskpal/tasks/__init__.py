"""
Task subsystem.

Components:
- task_models.py: data structures (ToDo, Deadline, Event, TaskKind)
- task_dates.py: date input parsing + display/storage formatting
- task_codec.py: one task <-> one pipe-delimited line
- task_store.py: whole-file load/save of the task collection
- task_list.py: the ordered task list (add/delete/mark/find/sort + auto-save)
- task_errors.py: exception taxonomy
"""
