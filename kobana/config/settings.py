# kobana/config/settings.py
import os
import logging
from typing import Any, Optional

from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

PRODUCTION_BASE_URI = "https://api.kobana.com.br"
SANDBOX_BASE_URI = "https://api-sandbox.kobana.com.br"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=os.path.join(os.getcwd(), '.env'),
        env_file_encoding='utf-8',
        extra='ignore'
    )

    KOBANA_API_KEY: Optional[str] = None
    KOBANA_ENV: str = "development"
    KOBANA_TIMEOUT: float = 30.0

    LOG_LEVEL: str = "INFO"

    @property
    def base_uri(self) -> str:
        """URL base da API conforme o ambiente configurado (produção ou sandbox)."""
        if self.KOBANA_ENV == "production":
            return PRODUCTION_BASE_URI
        return SANDBOX_BASE_URI


try:
    settings = Settings()
    logging.getLogger("kobana").setLevel(settings.LOG_LEVEL)
    logger.debug("Configurações do SDK carregadas do ambiente (incluindo .env se presente).")
except ValidationError as e:
    logger.critical(f"Erro de validação nas configurações do SDK: {e.errors()}.", exc_info=True)
    raise


_CONFIGURE_ALIASES = {
    "api_key": "KOBANA_API_KEY",
    "environment": "KOBANA_ENV",
    "timeout": "KOBANA_TIMEOUT",
    "log_level": "LOG_LEVEL",
}


def configure(**overrides: Any) -> Settings:
    """
    Atualiza as configurações globais do SDK em tempo de execução.

    Aceita tanto os nomes curtos (api_key, environment, timeout, log_level)
    quanto os nomes das variáveis de ambiente (KOBANA_API_KEY, ...).

    Returns:
        Settings: A instância global já atualizada.
    """
    for name, value in overrides.items():
        field = _CONFIGURE_ALIASES.get(name, name)
        if field not in Settings.model_fields:
            raise ValueError(f"Configuração desconhecida: '{name}'")
        setattr(settings, field, value)
        if field == "LOG_LEVEL":
            logging.getLogger("kobana").setLevel(value)
    logger.info(f"Configurações do SDK atualizadas: {sorted(overrides)} (ambiente: {settings.KOBANA_ENV}).")
    return settings
