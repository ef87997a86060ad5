"""Load environment variables early for the FastAPI app.

For local dev, loads a .env.dev file. In staging and prod, env vars are
injected by the deployment, so no .env file is loaded.
"""

import os
from typing import Literal
from dotenv import load_dotenv

EnvironmentName = Literal["dev", "staging", "prod"]

DEFAULT_PORT = 3000

# Load env vars before any app code runs.
env = os.getenv("ENV", "dev")
if env in ("staging", "prod"):
    print(f"Running in {env} environment (env vars from deployment)")
elif env == "dev":
    load_dotenv(".env.dev")
else:
    raise ValueError(f"Invalid ENV value: {env}. Must be 'dev', 'staging', or 'prod'.")


def get_current_environment() -> EnvironmentName:
    """Get the current environment (dev, staging, or prod)."""
    env = os.getenv("ENV", "dev")
    if env in ("dev", "staging", "prod"):
        return env  # type: ignore[return-value]
    raise ValueError(f"Invalid ENV value: {env}. Must be 'dev', 'staging', or 'prod'.")


def get_port() -> int:
    """Get the port to listen on from PORT, defaulting to 3000."""
    value = os.getenv("PORT", "").strip()
    if not value:
        return DEFAULT_PORT
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"Invalid PORT value: {value!r}")


def get_allowed_origins() -> list[str]:
    """Get the CORS allow-list from ALLOWED_ORIGINS (comma-separated).

    An empty list means every origin is allowed.
    """
    raw = os.getenv("ALLOWED_ORIGINS", "")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]
