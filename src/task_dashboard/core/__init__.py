"""
Build core.

Components:
- models.py: data structures (Section, Task, TaskSet, Note)
- state.py: shared build counter + AppState
- ports.py: Protocols used by the server and the CLI
- build.py: build orchestrator (parse -> render -> write)
"""
