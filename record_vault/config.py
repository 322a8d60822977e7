# ==============================================
# Configuration Management
# ==============================================
#
# PURPOSE:
#   Load and validate all configuration from environment
#   variables / .env file. Provides typed config objects
#   to all other modules.
#
# CLASSES:
# --------
# - MongoConfig (dataclass)
#     uri: str                 (required, MONGO_URI)
#     cert_path: str | None    (default None, MONGO_CERT_PATH)
#     database: str            (default "vault")
#     collection: str          (default "records")
#     timeout_ms: int          (default 5000)
#
# - VaultConfig (dataclass)
#     backups_dir: str         (default "backups")
#     export_file: str         (default "export.txt")
#
# - AppConfig (dataclass)
#     mongo: MongoConfig
#     vault: VaultConfig
#
# FUNCTIONS:
# ----------
# - get_config(env_file=None) -> AppConfig
#     Load .env using python-dotenv, construct AppConfig.
#     Returns the same singleton on repeated calls.
#     Raises ConfigurationError if MONGO_URI is missing.
#
# - reset_config() -> None
#     Drop the cached singleton (tests, CLI --env-file).
#
# USAGE:
# ------
#   from record_vault.config import get_config
#   config = get_config()
#   print(config.mongo.uri)
#   print(config.vault.backups_dir)
#
# ==============================================

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv

from record_vault.errors import ConfigurationError


@dataclass
class MongoConfig:
    """MongoDB connection configuration."""
    uri: str
    cert_path: Optional[str] = None
    database: str = "vault"
    collection: str = "records"
    timeout_ms: int = 5000

    def connect_options(self) -> Dict[str, Any]:
        """
        Keyword arguments for pymongo.MongoClient.

        TLS is switched on only when a client certificate is configured;
        the certificate path is resolved against the working directory.
        """
        options: Dict[str, Any] = {
            "serverSelectionTimeoutMS": self.timeout_ms,
            "tz_aware": True,
        }
        if self.cert_path:
            options["tls"] = True
            options["tlsCertificateKeyFile"] = str(Path(self.cert_path).resolve())
        return options


@dataclass
class VaultConfig:
    """Where backup and export artifacts are written."""
    backups_dir: str = "backups"
    export_file: str = "export.txt"


@dataclass
class AppConfig:
    """Main application configuration."""
    mongo: MongoConfig
    vault: VaultConfig = field(default_factory=VaultConfig)


# Singleton instance
_config_instance: Optional[AppConfig] = None


def _int_setting(name: str, default: str) -> int:
    raw = os.getenv(name, default)
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from None


def get_config(env_file: Optional[str] = None) -> AppConfig:
    """
    Load configuration from environment variables / .env file.
    Returns the same singleton instance on repeated calls.

    Args:
        env_file: Optional path to a .env file. Defaults to the
                  project root's .env.

    Returns:
        AppConfig: Application configuration

    Raises:
        ConfigurationError: MONGO_URI is missing or a numeric
                            setting is malformed.
    """
    global _config_instance

    if _config_instance is not None:
        return _config_instance

    # Load .env file from project root
    env_path = Path(env_file) if env_file else Path(__file__).parent.parent / ".env"
    load_dotenv(dotenv_path=env_path)

    uri = os.getenv("MONGO_URI")
    if not uri:
        raise ConfigurationError(
            "MONGO_URI is missing in .env. Please set it before running the app."
        )

    # Build MongoDB configuration
    mongo_config = MongoConfig(
        uri=uri,
        cert_path=os.getenv("MONGO_CERT_PATH") or None,
        database=os.getenv("MONGO_DATABASE", "vault"),
        collection=os.getenv("MONGO_COLLECTION", "records"),
        timeout_ms=_int_setting("MONGO_TIMEOUT_MS", "5000"),
    )

    # Build artifact configuration
    vault_config = VaultConfig(
        backups_dir=os.getenv("VAULT_BACKUPS_DIR", "backups"),
        export_file=os.getenv("VAULT_EXPORT_FILE", "export.txt"),
    )

    _config_instance = AppConfig(mongo=mongo_config, vault=vault_config)

    return _config_instance


def reset_config() -> None:
    """Forget the cached configuration so the next get_config() reloads it."""
    global _config_instance
    _config_instance = None
