import os
from dotenv import load_dotenv

load_dotenv()

APP_VERSION = os.getenv("APP_VERSION", "0.1.0")

LOG_LEVEL_FROM_ENV = os.getenv("LOG_LEVEL", "INFO").upper()

# Endpoint resolution
API_PROVIDER = os.getenv("API_PROVIDER", "openai")
API_URL_TEMPLATE = "https://api.{provider}.com/v{version}/{path}"
DEFAULT_API_VERSION = int(os.getenv("DEFAULT_API_VERSION", "1"))

# Request defaults
DEFAULT_CHAT_MODEL = os.getenv("DEFAULT_CHAT_MODEL", "gpt-3.5-turbo")
DEFAULT_TEMPERATURE = float(os.getenv("DEFAULT_TEMPERATURE", "0.7"))
DEFAULT_MAX_TOKENS = int(os.getenv("DEFAULT_MAX_TOKENS", "50"))
DEFAULT_N = int(os.getenv("DEFAULT_N", "1"))
DEFAULT_STOP_SEQUENCES = ["\n"]

# Credentials (read on demand, see core/security.py)
OPENAI_API_KEY_ENV = "OPENAI_API_KEY"
OPENAI_KEY_FILE = os.getenv("OPENAI_KEY_FILE", "config/openai.key")

# Transport
API_TIMEOUT = int(os.getenv("API_TIMEOUT", "300"))
READ_TIMEOUT = float(os.getenv("READ_TIMEOUT", "60.0"))
MAX_CONNECTIONS = int(os.getenv("MAX_CONNECTIONS", "200"))
