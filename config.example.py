# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TASKPAL_APP_NAME": "Assistant display name (default: taskpal).",
    "TASKPAL_LOG_LEVEL": "Console logging level (default: WARNING). The log file always gets DEBUG.",
    # Persistence
    "TASKPAL_AUTOSAVE": "Save the task file after every change (true/false, default: true).",
    # Paths
    "TASKPAL_DATA_DIR": "Local data directory (default: data).",
    "TASKPAL_TASKS_PATH": "Task file path (default: <data_dir>/tasks.txt).",
    "TASKPAL_LOG_DIR": "Directory for taskpal.log (default: <data_dir>).",
}
