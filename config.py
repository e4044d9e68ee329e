import os
from dotenv import load_dotenv

load_dotenv()
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")

LLM_MODEL = os.getenv("LLM_MODEL", "gpt-4o")
LLM_TEMPERATURE = float(os.getenv("LLM_TEMPERATURE", "0.0"))
# Unset means the provider call may wait indefinitely.
LLM_TIMEOUT = float(os.getenv("LLM_TIMEOUT")) if os.getenv("LLM_TIMEOUT") else None

# 0 keeps the whole session transcript.
MAX_TRANSCRIPT_MESSAGES = int(os.getenv("MAX_TRANSCRIPT_MESSAGES", "200"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
