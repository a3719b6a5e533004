# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TASKDASH_APP_NAME": "App display name (default: task-dashboard).",
    "TASKDASH_LOG_LEVEL": "Console logging level (default: INFO).",
    "TASKDASH_LOG_DIR": "Directory for task_dashboard.log (default: .local/task_dashboard).",
    # Inputs / outputs
    "TASKDASH_ROOT": "Project folder holding tasks.md and notes/ (default: current directory).",
    "TASKDASH_TASKS_FILE": "Task list path (default: <root>/tasks.md).",
    "TASKDASH_NOTES_DIR": "Notes folder, *.md files only, non-recursive (default: <root>/notes).",
    "TASKDASH_OUT_DIR": "Output folder for dashboard.html / notepad.html (default: <root>/_site).",
    # Live refresh (--serve)
    "TASKDASH_HOST": "Interface for the local server (default: 127.0.0.1).",
    "TASKDASH_PORT": "Port for the local server (default: 4242).",
    "TASKDASH_DEBOUNCE_MS": "Quiet period before a rebuild after file changes (default: 300).",
}
