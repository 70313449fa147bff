# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "FOCUSTASKS_APP_NAME": "App display name (default: FocusTasks).",
    "FOCUSTASKS_LOG_LEVEL": "Console logging level (default: INFO).",
    # Identity
    "FOCUSTASKS_USER_ID": "User identifier; the storage key is <prefix>_<user id> (default: 0000).",
    "FOCUSTASKS_KEY_PREFIX": "Storage key prefix (default: focustasks).",
    # Connectors
    "FOCUSTASKS_CONSOLE_ENABLED": "Run the console REPL (true/false, default: true).",
    # Paths (gitignored)
    "FOCUSTASKS_DATA_DIR": "Local data directory, also holds focustasks.log (default: .local/focustasks).",
    "FOCUSTASKS_STORAGE_PATH": "Key/value SQLite path (default: <data_dir>/storage.sqlite3).",
    # Tuning
    "FOCUSTASKS_STORAGE_QUOTA_BYTES": "Max bytes per stored value, 0 disables (default: 5242880).",
}
