from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional
import os

# Load .env file if it exists, for local development
if os.path.exists(".env"):
    from dotenv import load_dotenv
    load_dotenv()

class EngineSettings(BaseSettings):
    log_level: str = "INFO"
    storage_dir: str = ".nt_storage" # Directory for saved sessions and consent
    thresholds_path: Optional[str] = None # Packaged thresholds YAML when unset

    model_config = SettingsConfigDict(env_prefix='NT_ENGINE_')

def get_settings() -> EngineSettings:
    return EngineSettings()
