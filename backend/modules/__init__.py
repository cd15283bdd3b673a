"""
Feature modules for the Taskboard backend.

Each module keeps its own interfaces.py (Protocols), models.py (pydantic
models), service.py, exceptions.py and, where it exposes endpoints,
routes.py. A repository.py holds its Supabase access.

Concrete collaborators are wired together only in api/dependencies.py.
"""
