"""
Task subsystem.

Components:
- task_models.py: data structures (Task, Priority, Status)
- codecs.py: text <-> enum conversion for Priority and Status
- due_dates.py: DD-MM-YYYY due date validation
- task_store.py: in-memory ordered task collection + query/update helpers
- exporter.py: JSON snapshot of the store contents
"""
