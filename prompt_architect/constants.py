"""Constants used throughout the application."""

# Gemini related constants
DEFAULT_GEMINI_MODEL = "gemini-2.5-flash"

# Copy confirmation
COPY_RESET_DELAY_SECONDS = 2.0

# User-facing messages
API_KEY_MISSING_MESSAGE = "API Key not found in environment variables"
ENHANCE_FAILED_MESSAGE = "Failed to enhance prompt. Please check your API key and try again."
UNKNOWN_ERROR_MESSAGE = "An unknown error occurred"

# Labels
APP_TITLE = "Prompt Architect"
SUBMIT_LABEL = "Enhance Prompt"
SUBMIT_LOADING_LABEL = "Architecting..."
COPY_LABEL = "Copy JSON"
COPIED_LABEL = "Copied"

# File paths
SYSTEM_INSTRUCTION_FILE = "system_instruction.txt"
EXAMPLE_SPEC_FILE = "example_spec.json"
