"""
Task subsystem.

Components:
- task_models.py: ToDo / Deadline / Event and their display form
- dates.py: strict date and time parsing shared by models, grammar and snooze
- codec.py: one-line text encoding of a task
- task_store.py: flat-file storage (load once, rewrite on every change)
- task_list.py: the ordered, 1-indexed collection the commands work on
- snooze.py: rescheduling of deadlines and events
"""
