"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service can be started against a local MongoDB without any setup.  A
``.env`` file in the working directory is loaded first, which is how
Atlas credentials are normally supplied in deployment.
"""

import os
from dataclasses import dataclass
from urllib.parse import quote_plus

from dotenv import load_dotenv

load_dotenv()


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Lesson Booking API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

    # A full connection string wins over the individual Atlas parts.
    mongo_uri: str = os.getenv("MONGO_URI", "")
    db_user: str = os.getenv("DB_USER", "")
    db_password: str = os.getenv("DB_PASSWORD", "")
    db_host: str = os.getenv("DB_HOST", "")
    db_name: str = os.getenv("DB_NAME", "AFTER_SCHOOL_LESSONS")

    # Directory holding the frontend bundle; lesson images live in
    # ``<public_dir>/images``.  Relative paths are resolved against the
    # current working directory.
    public_dir: str = os.getenv("PUBLIC_DIR", "public")

    # Comma‑separated list of allowed CORS origins.
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")

    @property
    def database_uri(self) -> str:
        """Build the MongoDB connection string.

        ``MONGO_URI`` is used verbatim when set.  Otherwise, if
        ``DB_HOST`` is present, an Atlas ``mongodb+srv`` URI is assembled
        from the user, password, host and database name.  Without either,
        a local server on the default port is assumed.
        """
        if self.mongo_uri:
            return self.mongo_uri
        if self.db_host:
            credentials = ""
            if self.db_user:
                credentials = quote_plus(self.db_user)
                if self.db_password:
                    credentials += ":" + quote_plus(self.db_password)
                credentials += "@"
            return (
                f"mongodb+srv://{credentials}{self.db_host}/{self.db_name}"
                "?retryWrites=true&w=majority"
            )
        return "mongodb://localhost:27017"

    @property
    def allowed_origins(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes values at class definition time, environment variables should
# be set before importing this module.
settings = Settings()
