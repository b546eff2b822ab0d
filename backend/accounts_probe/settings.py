# accounts_probe/settings.py
import os
from pathlib import Path
from typing import Literal, Mapping, Optional

from dotenv import dotenv_values
from pydantic import BaseModel, ConfigDict

from .models import ConnectionConfig

PROXY = "proxy"
DEFAULT_ENV_FILE = ".env.public"
PROXY_ENV_FILE = ".env.proxy"


class RunOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    output_format: Literal["delimited", "raw"] = "delimited"
    silent_failures: bool = False


def env_file_for(discriminator: Optional[str]) -> str:
    return PROXY_ENV_FILE if discriminator == PROXY else DEFAULT_ENV_FILE


def tls_verify_for(discriminator: Optional[str], reject_unauthorized: Optional[str]) -> bool:
    """Proxy mode never verifies certificates; otherwise only the literal "true" enables it."""
    if discriminator == PROXY:
        return False
    return reject_unauthorized == "true"


def resolve_environment(environ: Optional[Mapping[str, str]] = None,
                        base_dir: Optional[Path] = None) -> dict:
    """
    Merge the selected env file with the process environment.
    The discriminator (ENV) is only read from the process environment,
    and process values win over file values, like load_dotenv(override=False).
    """
    environ = os.environ if environ is None else environ
    base_dir = Path.cwd() if base_dir is None else Path(base_dir)
    path = base_dir / env_file_for(environ.get("ENV"))
    # dotenv_values yields {} for a missing file
    file_values = {k: v for k, v in dotenv_values(path).items() if v is not None}
    return {**file_values, **environ}


def load_connection_config(values: Mapping[str, str], discriminator: Optional[str] = None) -> ConnectionConfig:
    # Missing keys are left out so pydantic reports them as missing fields
    fields = {
        name: values[key]
        for name, key in (
            ("host", "host"),
            ("port", "port"),
            ("user", "user"),
            ("password", "password"),
            ("database", "database"),
            ("sslrootcert", "PGSSLROOTCERT"),
        )
        if values.get(key) is not None
    }
    fields["tls_verify"] = tls_verify_for(discriminator, values.get("rejectUnauthorized"))
    return ConnectionConfig(**fields)


def load_run_options(values: Mapping[str, str]) -> RunOptions:
    return RunOptions(
        output_format=values.get("OUTPUT_FORMAT", "delimited").strip().lower(),
        silent_failures=values.get("SILENT_FAILURES", "").strip().lower() == "true",
    )


def load_settings(environ: Optional[Mapping[str, str]] = None,
                  base_dir: Optional[Path] = None) -> tuple[ConnectionConfig, RunOptions]:
    environ = os.environ if environ is None else environ
    values = resolve_environment(environ, base_dir)
    config = load_connection_config(values, environ.get("ENV"))
    return config, load_run_options(values)
