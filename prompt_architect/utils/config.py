import os
from pathlib import Path
from dotenv import load_dotenv

from prompt_architect.constants import DEFAULT_GEMINI_MODEL

class Config:
    def __init__(self):
        # Load appropriate .env file based on environment
        self.env = os.getenv("PROMPT_ARCHITECT_ENV", "dev")
        self._load_env_file()

        # Google AI settings
        self.google_ai_api_key = os.getenv("GOOGLE_AI_API_KEY")
        self.google_ai_model = os.getenv("GOOGLE_AI_MODEL", DEFAULT_GEMINI_MODEL)

        # Logging settings
        self.log_level = os.getenv("LOG_LEVEL", "INFO").upper()
        self.log_format = os.getenv("LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    @property
    def has_api_key(self) -> bool:
        return bool(self.google_ai_api_key and self.google_ai_api_key.strip())

    def _load_env_file(self):
        """Load the appropriate .env file based on the environment."""
        env_file = ".env"

        # Check for environment-specific .env file
        if self.env != "dev":
            env_specific_file = f".env.{self.env}"
            if Path(env_specific_file).exists():
                env_file = env_specific_file
                print(f"Loading environment from {env_file}")
            else:
                print(f"Warning: {env_specific_file} not found, falling back to .env")

        # Variables already set in the process environment win over the file
        load_dotenv(env_file)

# Create a global config instance
config = Config()
