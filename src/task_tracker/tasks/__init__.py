"""
Task subsystem.

Components:
- errors.py: DescriptionError, InvalidStatusError, TaskNotFoundError
- task_models.py: data structures (Task, TaskStatus), validation, JSON document codec
- id_generator.py: watermark-based id generator seeded from loaded data
- task_repository.py: load -> mutate -> validate -> save CRUD over a JSON file store
"""
