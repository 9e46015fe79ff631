"""Document analysis service: Textract form, text and disability-keyword extraction over HTTP."""

from pathlib import Path

from dotenv import load_dotenv

# Local development reads AWS and server settings from .env at the project root. Variables
# already set in the environment take precedence; deployments do not ship a .env file.
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
ENV_FILE_PATH = PROJECT_ROOT / ".env"

if ENV_FILE_PATH.exists():
    load_dotenv(ENV_FILE_PATH, override=False)
