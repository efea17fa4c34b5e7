# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Do NOT commit real secrets; keep them in .env (local, gitignored).
"""

ENV_VARS = {
    # App / logging
    "TIDY_APP_NAME": "App display name (default: tidy-tasks).",
    "TIDY_LOG_LEVEL": "Console logging level (default: INFO).",
    "TIDY_DATA_DIR": "Local directory for the log file (default: .local/tidy).",
    "TIDY_CONSOLE_ENABLED": "Run the console REPL (true/false, default: true).",
    # Remote classifier
    "TIDY_OPENAI_API_KEY": "API key; falls back to OPENAI_API_KEY. Empty => keyword categorization only.",
    "TIDY_OPENAI_BASE_URL": "Optional OpenAI-compatible base URL; falls back to OPENAI_BASE_URL.",
    "TIDY_CLASSIFIER_MODEL": "Chat model used for categorization (default: gpt-3.5-turbo).",
    "TIDY_CLASSIFIER_MAX_TOKENS": "Answer size limit (default: 10).",
    "TIDY_CLASSIFIER_TEMPERATURE": "Sampling temperature (default: 0.3).",
    "TIDY_CLASSIFIER_CONNECT_TIMEOUT_SECONDS": "Connect timeout for the classifier call (default: 5).",
    "TIDY_CLASSIFIER_READ_TIMEOUT_SECONDS": "Read timeout for the classifier call (default: 15).",
}
