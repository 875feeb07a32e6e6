# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TASKTRAIL_APP_NAME": "App display name shown in the menu title (default: tasktrail).",
    "TASKTRAIL_LOG_LEVEL": "Console logging level (default: WARNING).",
    "TASKTRAIL_LOG_TO_FILE": "Also write DEBUG logs to <log_dir>/tasktrail.log (true/false).",
    # Console
    "TASKTRAIL_TIMESTAMPS": "Prefix console replies with a local timestamp (true/false).",
    # Paths (gitignored)
    "TASKTRAIL_DATA_DIR": "Local data directory (default: .local/tasktrail).",
    "TASKTRAIL_LOG_DIR": "Log directory (default: <data_dir>).",
}
